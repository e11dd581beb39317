"""logic/tick.py — The composed simulation step.

One tick runs the rules in a fixed order, each consuming the previous
step's output:

    clock.advance → vitals.apply_tick → outcome.settle → scheduler.maybe_trigger

The night-window check therefore sees the *advanced* time, and the
scheduler sees the post-tick stats and verdict (it never fires on a
tick that ended the game).

Usage::

    from logic.tick import tick_state
    state = tick_state(state, catalog.events, rng)
"""

from __future__ import annotations
from typing import Sequence

from components import SessionState, NarrativeEvent
from logic.clock import advance
from logic.vitals import apply_tick
from logic.outcome import settle
from logic.scheduler import maybe_trigger, RandomSource


def tick_state(state: SessionState, events: Sequence[NarrativeEvent],
               rng: RandomSource) -> SessionState:
    """Run one tick.  A session that isn't running is returned as-is."""
    if not state.running or state.onboarding or state.over:
        return state

    state = advance(state)
    state = apply_tick(state)
    state = settle(state)
    state = maybe_trigger(state, events, rng)
    return state
