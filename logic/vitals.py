"""logic/vitals.py — Energy, sleep and health regulation.

Runs once per tick, after the clock has moved:

    decay   every tick          energy -0.3   sleep -0.2   health -0.1
    regen   night window only   energy +0.5   sleep +0.8   health +0.3

Decay and regeneration are summed first and the result is clamped once,
so a stat sitting at 100 at night stays at 100 rather than dipping.

``apply_effect`` is the other writer: it adds the sparse deltas of a
room object or an event choice and clamps each touched stat.
"""

from __future__ import annotations
from dataclasses import replace

from components import SessionState, StatEffect, clamp_stat
from core.constants import DECAY, NIGHT_REGEN, NIGHT_START, NIGHT_END, STAT_NAMES


def in_night_window(time_of_day: int) -> bool:
    """22:00–08:00, both ends inclusive."""
    return time_of_day >= NIGHT_START or time_of_day <= NIGHT_END


def tick_deltas(time_of_day: int) -> dict[str, float]:
    """Net per-tick change for each stat at *time_of_day* (pre-clamp)."""
    night = in_night_window(time_of_day)
    deltas = {}
    for name in STAT_NAMES:
        delta = -DECAY[name]
        if night:
            delta += NIGHT_REGEN[name]
        deltas[name] = delta
    return deltas


def apply_tick(state: SessionState) -> SessionState:
    """Apply one tick of decay (and night regeneration) to all stats."""
    deltas = tick_deltas(state.time_of_day)
    return replace(state, **{
        name: clamp_stat(state.stat(name) + delta)
        for name, delta in deltas.items()
    })


def apply_effect(state: SessionState, effect: StatEffect) -> SessionState:
    """Add *effect*'s deltas; untouched stats keep their exact value."""
    changes = {
        name: clamp_stat(state.stat(name) + delta)
        for name, delta in effect.items()
    }
    if not changes:
        return state
    return replace(state, **changes)
