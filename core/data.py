"""
core/data.py — TOML → catalog loader

Reads the static content tables and builds the frozen records from
``components.catalog``.  Loaded once at startup, never mutated.

    data/rooms.toml    [[rooms]] with nested [[rooms.objects]]
    data/events.toml   [[events]] with nested [[events.choices]]

Event *conditions* are not data: each event is bound by id to the
predicate registered in ``logic.conditions``.

Usage:
    catalog = Catalog.from_files()                       # default data/ dir
    catalog = Catalog.from_files("my/rooms.toml", "my/events.toml")
    bedroom = catalog.room("bedroom")
"""

from __future__ import annotations
import tomllib
from pathlib import Path
from typing import Any

from components import Room, InteractionObject, EventChoice, NarrativeEvent, StatEffect
from core.constants import MIN_CHOICES, MAX_CHOICES, MIN_ROOM_OBJECTS, MAX_ROOM_OBJECTS
from logic.conditions import get_condition, registered_ids


DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class CatalogError(ValueError):
    """Raised when a content table is missing or malformed."""


class Catalog:
    """Rooms (with their objects) and narrative events."""

    def __init__(self, rooms: tuple[Room, ...] | list[Room],
                 events: tuple[NarrativeEvent, ...] | list[NarrativeEvent]):
        self.rooms: tuple[Room, ...] = tuple(rooms)
        self.events: tuple[NarrativeEvent, ...] = tuple(events)
        self._rooms_by_id = {r.id: r for r in self.rooms}
        self._check_unique_objects()

    # ── public API ──────────────────────────────────────────────────

    def room(self, room_id: str) -> Room | None:
        return self._rooms_by_id.get(room_id)

    def has_room(self, room_id: str) -> bool:
        return room_id in self._rooms_by_id

    def room_ids(self) -> list[str]:
        return [r.id for r in self.rooms]

    def event(self, event_id: str) -> NarrativeEvent | None:
        for evt in self.events:
            if evt.id == event_id:
                return evt
        return None

    def _check_unique_objects(self) -> None:
        # Usage is tracked by object id alone, so an id shared by two
        # rooms would consume both objects at once.
        seen: dict[str, str] = {}
        for room in self.rooms:
            for obj in room.objects:
                if obj.id in seen:
                    raise CatalogError(
                        f"object id {obj.id!r} used in both {seen[obj.id]!r} and {room.id!r}")
                seen[obj.id] = room.id

    # ── loading ─────────────────────────────────────────────────────

    @classmethod
    def from_files(cls, rooms_path: str | Path | None = None,
                   events_path: str | Path | None = None) -> "Catalog":
        rooms = load_rooms(rooms_path or DATA_DIR / "rooms.toml")
        events = load_events(events_path or DATA_DIR / "events.toml")
        catalog = cls(rooms, events)
        n_objects = sum(len(r.objects) for r in catalog.rooms)
        print(f"[CATALOG] loaded {len(catalog.rooms)} rooms, "
              f"{n_objects} objects, {len(catalog.events)} events")
        return catalog


# ── file readers ─────────────────────────────────────────────────────

def _read_toml(path: str | Path) -> dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"catalog file not found: {path}")
    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise CatalogError(f"{path}: {exc}") from exc


def _effect(table: dict[str, Any], where: str) -> StatEffect:
    try:
        return StatEffect.from_table(table.get("effects", {}))
    except (KeyError, TypeError, ValueError) as exc:
        raise CatalogError(f"{where}: bad effects ({exc})") from exc


def _require(table: dict[str, Any], key: str, where: str) -> str:
    value = table.get(key)
    if not isinstance(value, str) or not value:
        raise CatalogError(f"{where}: missing {key!r}")
    return value


def load_rooms(path: str | Path) -> list[Room]:
    """Parse ``rooms.toml`` into ``Room`` records."""
    data = _read_toml(path)
    rooms: list[Room] = []
    seen: set[str] = set()

    for rdata in data.get("rooms", []):
        room_id = _require(rdata, "id", "room")
        if room_id in seen:
            raise CatalogError(f"duplicate room id {room_id!r}")
        seen.add(room_id)

        objects = []
        for odata in rdata.get("objects", []):
            obj_id = _require(odata, "id", f"room {room_id!r} object")
            objects.append(InteractionObject(
                id=obj_id,
                label=odata.get("label", obj_id),
                effect=_effect(odata, f"object {obj_id!r}"),
            ))

        if not MIN_ROOM_OBJECTS <= len(objects) <= MAX_ROOM_OBJECTS:
            raise CatalogError(
                f"room {room_id!r} has {len(objects)} objects "
                f"(expected {MIN_ROOM_OBJECTS}-{MAX_ROOM_OBJECTS})")

        rooms.append(Room(id=room_id, label=rdata.get("label", room_id),
                          objects=tuple(objects)))

    if not rooms:
        raise CatalogError(f"{path}: no rooms defined")
    return rooms


def load_events(path: str | Path) -> list[NarrativeEvent]:
    """Parse ``events.toml`` and bind each event to its condition."""
    data = _read_toml(path)
    events: list[NarrativeEvent] = []
    seen: set[str] = set()

    for edata in data.get("events", []):
        event_id = _require(edata, "id", "event")
        if event_id in seen:
            raise CatalogError(f"duplicate event id {event_id!r}")
        seen.add(event_id)

        condition = get_condition(event_id)
        if condition is None:
            raise CatalogError(f"event {event_id!r} has no registered condition")

        choices = tuple(
            EventChoice(text=_require(cdata, "text", f"event {event_id!r} choice"),
                        effect=_effect(cdata, f"event {event_id!r} choice"))
            for cdata in edata.get("choices", [])
        )
        if not MIN_CHOICES <= len(choices) <= MAX_CHOICES:
            raise CatalogError(
                f"event {event_id!r} has {len(choices)} choices "
                f"(expected {MIN_CHOICES}-{MAX_CHOICES})")

        events.append(NarrativeEvent(
            id=event_id,
            title=edata.get("title", event_id),
            description=edata.get("description", ""),
            choices=choices,
            condition=condition,
        ))

    orphans = set(registered_ids()) - seen
    if orphans:
        print(f"[CATALOG] conditions without an event: {', '.join(sorted(orphans))}")
    return events
