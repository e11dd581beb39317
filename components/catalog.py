"""components.catalog — Static content records.

Loaded once at startup from ``data/rooms.toml`` and ``data/events.toml``
(see ``core.data``) and never mutated afterwards:

  Room               — one of the five house rooms, owns its objects
  InteractionObject  — a one-shot clickable object inside a room
  EventChoice        — one answer to a narrative event
  NarrativeEvent     — a random event with an eligibility condition
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from components.vitals import StatEffect

if TYPE_CHECKING:
    from components.session import SessionState


@dataclass(frozen=True, slots=True)
class InteractionObject:
    id: str
    label: str
    effect: StatEffect = field(default_factory=StatEffect)


@dataclass(frozen=True, slots=True)
class Room:
    """A room and its fixed object list (4–5 objects, ids unique globally)."""
    id: str
    label: str
    objects: tuple[InteractionObject, ...] = ()

    def get_object(self, object_id: str) -> InteractionObject | None:
        for obj in self.objects:
            if obj.id == object_id:
                return obj
        return None


@dataclass(frozen=True, slots=True)
class EventChoice:
    text: str
    effect: StatEffect = field(default_factory=StatEffect)


@dataclass(frozen=True, slots=True)
class NarrativeEvent:
    """A narrative event the scheduler may surface.

    ``condition`` is a pure predicate over ``SessionState``; it is bound
    from the condition registry by ``id`` when the catalog is loaded.
    """
    id: str
    title: str
    description: str
    choices: tuple[EventChoice, ...]
    condition: Callable[["SessionState"], bool] = field(compare=False, repr=False,
                                                       default=lambda state: False)

    def eligible(self, state: "SessionState") -> bool:
        return bool(self.condition(state))
