"""logic/scheduler.py — Random narrative events.

Runs once per tick, after the clock, vitals and outcome steps:

    1. Bail out if the session is over, paused (an event is already
       pending) or still onboarding.  No random number is drawn.
    2. Draw one sample; only a sample below ``EVENT_FIRE_CHANCE`` (20 %)
       lets an event fire this tick.
    3. Keep the events whose condition holds for the current state.
    4. Pick one of them uniformly with a second draw, make it the
       pending event and pause the session until the player answers.

The random source is a plain ``() -> float`` in [0, 1) so tests can feed
a fixed sequence.  Nothing else in the engine consumes randomness.
"""

from __future__ import annotations
import random
from dataclasses import replace
from typing import Callable, Iterable, Sequence

from components import SessionState, NarrativeEvent
from core.constants import EVENT_FIRE_CHANCE


RandomSource = Callable[[], float]


def default_rng() -> RandomSource:
    return random.random


def eligible_events(state: SessionState,
                    events: Iterable[NarrativeEvent]) -> list[NarrativeEvent]:
    """Events whose condition holds for *state*, in catalog order."""
    return [evt for evt in events if evt.eligible(state)]


def can_trigger(state: SessionState) -> bool:
    return not state.over and state.running and not state.onboarding


def pick(events: Sequence[NarrativeEvent], rng: RandomSource) -> NarrativeEvent:
    """Uniform choice driven by *rng* (``floor(sample * n)``)."""
    index = int(rng() * len(events))
    return events[min(index, len(events) - 1)]


def maybe_trigger(state: SessionState, events: Sequence[NarrativeEvent],
                  rng: RandomSource) -> SessionState:
    """Return *state* with a pending event set, or *state* unchanged."""
    if not can_trigger(state):
        return state

    if rng() >= EVENT_FIRE_CHANCE:
        return state

    candidates = eligible_events(state, events)
    if not candidates:
        return state

    chosen = pick(candidates, rng)
    return replace(state, pending_event=chosen, running=False)
