"""logic/outcome.py — Win / loss evaluation.

Checked after the stat update of every tick.  Loss is checked first and
wins ties: a tick that empties a stat on day 8 is a loss even if the
other stats would qualify for a win.
"""

from __future__ import annotations
from dataclasses import replace

from components import SessionState, Terminal
from core.constants import STAT_NAMES, STAT_MIN, WIN_AFTER_DAY, WIN_STAT_FLOOR


def evaluate(state: SessionState) -> Terminal:
    if any(state.stat(name) <= STAT_MIN for name in STAT_NAMES):
        return Terminal.LOST
    if state.day > WIN_AFTER_DAY and all(
        state.stat(name) > WIN_STAT_FLOOR for name in STAT_NAMES
    ):
        return Terminal.WON
    return Terminal.NONE


def settle(state: SessionState) -> SessionState:
    """Install the verdict; a finished session stops running for good."""
    if state.over:
        return state
    verdict = evaluate(state)
    if verdict is Terminal.NONE:
        return state
    return replace(state, terminal=verdict, running=False)
