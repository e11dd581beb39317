"""components.session — The session state value.

``SessionState`` is the single source of truth for one play-through.
It is immutable: every rule in ``logic/`` takes a state and returns a
new one (``dataclasses.replace``), and ``GameSession`` installs the
result with a single assignment.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from components.catalog import NarrativeEvent
from core.constants import (
    START_ENERGY, START_SLEEP, START_HEALTH,
    START_DAY, START_TIME, START_ROOM,
)


class Terminal(Enum):
    NONE = "none"
    LOST = "lost"
    WON = "won"


@dataclass(frozen=True, slots=True)
class SessionState:
    energy: float = START_ENERGY
    sleep: float = START_SLEEP
    health: float = START_HEALTH
    day: int = START_DAY
    time_of_day: int = START_TIME      # whole game-minutes since 00:00
    tick_rate: int = 1                 # whole speed multiplier, >= 1
    running: bool = False
    terminal: Terminal = Terminal.NONE
    used_interactions: frozenset[str] = field(default_factory=frozenset)
    current_room: str = START_ROOM
    onboarding: bool = True
    pending_event: NarrativeEvent | None = None

    # ── Derived views ───────────────────────────────────────────────

    @property
    def over(self) -> bool:
        """True once the session has been won or lost."""
        return self.terminal is not Terminal.NONE

    @property
    def awaiting_choice(self) -> bool:
        return self.pending_event is not None

    def stat(self, name: str) -> float:
        return getattr(self, name)

    def has_used(self, object_id: str) -> bool:
        return object_id in self.used_interactions


def initial_state() -> SessionState:
    """Fresh session: 80/70/90, day 1 at 07:30, bedroom, onboarding."""
    return SessionState()
