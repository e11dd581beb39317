"""logic/interactions.py — One-shot room objects.

Clicking an object applies its stat effect once per session.  Anything
that can't be applied (session not started or already finished, object
already used, object not in that room, unknown room) is a no-op that
returns the very same state object, so callers can detect it with ``is``.
"""

from __future__ import annotations
from dataclasses import replace
from typing import TYPE_CHECKING

from components import SessionState, InteractionObject
from logic.vitals import apply_effect

if TYPE_CHECKING:
    from core.data import Catalog


def find_object(catalog: "Catalog", room_id: str, object_id: str) -> InteractionObject | None:
    """Look *object_id* up in *room_id*'s object list only."""
    room = catalog.room(room_id)
    if room is None:
        return None
    return room.get_object(object_id)


def apply_interaction(state: SessionState, catalog: "Catalog",
                      room_id: str, object_id: str) -> SessionState:
    if state.over or state.onboarding:
        return state
    if state.has_used(object_id):
        return state
    obj = find_object(catalog, room_id, object_id)
    if obj is None:
        return state

    state = apply_effect(state, obj.effect)
    return replace(state, used_interactions=state.used_interactions | {object_id})


def room_view(state: SessionState, catalog: "Catalog",
              room_id: str | None = None) -> list[tuple[InteractionObject, bool]]:
    """``[(object, used), …]`` for a room (default: the current one)."""
    room = catalog.room(room_id or state.current_room)
    if room is None:
        return []
    return [(obj, state.has_used(obj.id)) for obj in room.objects]
