"""logic/conditions.py — Event id → eligibility predicate mapping.

Event text and choices live in ``data/events.toml``; the *when* lives
here because it is behaviour, not data.  ``core.data`` binds each event
to the predicate registered under its id and refuses to load an event
that has none.

Every predicate is pure: it only reads the ``SessionState`` it is given.
"""

from __future__ import annotations
from typing import Callable

from components import SessionState


Condition = Callable[[SessionState], bool]

_registry: dict[str, Condition] = {}


def register_condition(event_id: str, fn: Condition) -> None:
    """Register *fn* as the eligibility predicate for *event_id*."""
    _registry[event_id] = fn


def get_condition(event_id: str) -> Condition | None:
    """Return the predicate for *event_id*, or ``None``."""
    return _registry.get(event_id)


def registered_ids() -> list[str]:
    """Return a sorted list of all event ids with a predicate."""
    return sorted(_registry.keys())


def _between(t: float, start: int, end: int) -> bool:
    return start <= t <= end


# ── Predicates ───────────────────────────────────────────────────────

def low_energy_morning(s: SessionState) -> bool:
    return s.energy < 30 and _between(s.time_of_day, 420, 600)


def afternoon_slump(s: SessionState) -> bool:
    return s.sleep < 40 and _between(s.time_of_day, 780, 960)


def late_night_decision(s: SessionState) -> bool:
    return s.time_of_day >= 1380 and s.sleep < 50


def weekend_temptation(s: SessionState) -> bool:
    # day 6 / day 7 of each week (Saturday, Sunday)
    return s.day % 7 in (6, 0) and s.time_of_day >= 1080


def stress_situation(s: SessionState) -> bool:
    return s.health < 40


def exercise_motivation(s: SessionState) -> bool:
    return s.energy > 60 and s.health < 70


def meal_choice(s: SessionState) -> bool:
    return _between(s.time_of_day, 720, 780) or _between(s.time_of_day, 1080, 1140)


def screen_time(s: SessionState) -> bool:
    return s.time_of_day >= 1200 and s.sleep < 60


def hydration_reminder(s: SessionState) -> bool:
    return s.health < 80 and s.energy < 50


def social_interaction(s: SessionState) -> bool:
    return s.health < 60 and _between(s.time_of_day, 600, 1200)


register_condition("low-energy-morning", low_energy_morning)
register_condition("afternoon-slump", afternoon_slump)
register_condition("late-night-decision", late_night_decision)
register_condition("weekend-temptation", weekend_temptation)
register_condition("stress-situation", stress_situation)
register_condition("exercise-motivation", exercise_motivation)
register_condition("meal-choice", meal_choice)
register_condition("screen-time", screen_time)
register_condition("hydration-reminder", hydration_reminder)
register_condition("social-interaction", social_interaction)
