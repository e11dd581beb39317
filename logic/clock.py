"""logic/clock.py — Time of day and day counter.

One tick adds ``MINUTES_PER_TICK * tick_rate`` game-minutes.  Crossing
midnight subtracts a single day's worth of minutes and bumps the day
counter by one.  Only one rollover is applied per tick: at the speeds
the game offers a tick is a few minutes long, so a tick can never span
more than one midnight.
"""

from __future__ import annotations
from dataclasses import replace

from components import SessionState
from core.constants import MINUTES_PER_DAY, MINUTES_PER_TICK, BASE_TICK_MS, WEEKDAYS


def advance(state: SessionState) -> SessionState:
    """Move the clock forward by one tick."""
    time = state.time_of_day + MINUTES_PER_TICK * state.tick_rate
    day = state.day
    if time >= MINUTES_PER_DAY:
        time -= MINUTES_PER_DAY
        day += 1
    return replace(state, time_of_day=time, day=day)


def tick_interval_ms(tick_rate: int) -> float:
    """Real milliseconds between ticks at *tick_rate*."""
    return BASE_TICK_MS / tick_rate


def format_time(minutes: int) -> str:
    """``450`` → ``"07:30"``."""
    hours = (minutes // 60) % 24
    mins = minutes % 60
    return f"{hours:02d}:{mins:02d}"


def day_of_week(day: int) -> str:
    """Weekday name for a 1-based day counter (day 1 is a Monday)."""
    return WEEKDAYS[(day - 1) % 7]


def is_weekend(day: int) -> bool:
    return day % 7 in (6, 0)
