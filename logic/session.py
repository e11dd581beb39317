"""logic/session.py — GameSession, the player-facing orchestrator.

Owns the current ``SessionState`` plus the things the rules need (the
catalog and the random source) and exposes every operation the front-
end may call:

    begin()                 leave the welcome screen, start the clock
    tick()                  one composed simulation step (logic.tick)
    resolve_event(i)        answer the pending narrative event
    interact(object_id)     use a one-shot object in the current room
    change_room(room_id)
    toggle_pause()
    set_tick_rate(n)        whole game speed multiplier
    reset()                 brand-new session

Each operation builds the next state with the pure functions in
``logic/`` and installs it with one assignment, so there is never a
half-applied update.  All calls are expected on one thread (the pygame
frame loop); a multi-threaded host must serialise them itself.

When an ``EventBus`` is given, domain events from ``core.events`` are
emitted after the new state is installed.
"""

from __future__ import annotations
from dataclasses import replace

from components import SessionState, Terminal, InteractionObject, Room, initial_state
from core.data import Catalog
from core.events import (
    EventBus, SessionBegan, SessionReset, DayStarted, InteractionUsed,
    RoomChanged, NarrativeEventTriggered, NarrativeEventResolved, SessionEnded,
)
from logic.clock import format_time, day_of_week, tick_interval_ms
from logic.interactions import apply_interaction, room_view
from logic.scheduler import RandomSource, default_rng
from logic.tick import tick_state
from logic.vitals import apply_effect


class InvalidChoiceError(ValueError):
    """``resolve_event`` was given an index outside the pending event's choices."""


class GameSession:
    def __init__(self, catalog: Catalog, rng: RandomSource | None = None,
                 bus: EventBus | None = None,
                 state: SessionState | None = None):
        self.catalog = catalog
        self.rng: RandomSource = rng or default_rng()
        self.bus = bus
        self._state: SessionState = state or initial_state()

    # ── Read-only views ──────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        """The current immutable snapshot."""
        return self._state

    @property
    def rooms(self) -> tuple[Room, ...]:
        return self.catalog.rooms

    def room_objects(self) -> list[tuple[InteractionObject, bool]]:
        """Objects of the current room with their used flag."""
        return room_view(self._state, self.catalog)

    def clock_label(self) -> str:
        return format_time(self._state.time_of_day)

    def weekday(self) -> str:
        return day_of_week(self._state.day)

    def tick_interval_ms(self) -> float:
        return tick_interval_ms(self._state.tick_rate)

    # ── Operations ───────────────────────────────────────────────────

    def begin(self) -> SessionState:
        s = self._state
        if not s.onboarding:
            return s
        self._install(replace(s, onboarding=False, running=True))
        print(f"[SESSION] started — day {self._state.day}, "
              f"{self.weekday()} {self.clock_label()}")
        self._emit(SessionBegan(day=self._state.day))
        return self._state

    def tick(self) -> SessionState:
        before = self._state
        after = tick_state(before, self.catalog.events, self.rng)
        if after is before:
            return before
        self._install(after)

        if after.day != before.day:
            print(f"[CLOCK] day {after.day} ({day_of_week(after.day)})")
            self._emit(DayStarted(day=after.day, weekday=day_of_week(after.day)))
        if after.terminal is not before.terminal:
            print(f"[SESSION] {after.terminal.value} on day {after.day} — "
                  f"energy={after.energy:.1f} sleep={after.sleep:.1f} "
                  f"health={after.health:.1f}")
            self._emit(SessionEnded(verdict=after.terminal.value, day=after.day))
        if after.pending_event is not None and before.pending_event is None:
            evt = after.pending_event
            print(f"[EVENT] {evt.id} at {self.clock_label()}")
            self._emit(NarrativeEventTriggered(event_id=evt.id, title=evt.title))
        return after

    def resolve_event(self, choice_index: int) -> SessionState:
        s = self._state
        evt = s.pending_event
        if evt is None:
            return s
        if not 0 <= choice_index < len(evt.choices):
            raise InvalidChoiceError(
                f"choice {choice_index} out of range for {evt.id!r} "
                f"({len(evt.choices)} choices)")

        choice = evt.choices[choice_index]
        new = apply_effect(s, choice.effect)
        # Terminal is only ever set inside tick(), so the session can
        # always resume here.
        new = replace(new, pending_event=None, running=not new.over)
        self._install(new)
        print(f"[EVENT] {evt.id} → {choice.text!r} ({choice.effect.describe()})")
        self._emit(NarrativeEventResolved(event_id=evt.id, choice_index=choice_index))
        return new

    def interact(self, object_id: str) -> SessionState:
        s = self._state
        new = apply_interaction(s, self.catalog, s.current_room, object_id)
        if new is s:
            return s
        self._install(new)
        print(f"[SESSION] used {object_id} in {s.current_room}")
        self._emit(InteractionUsed(object_id=object_id, room_id=s.current_room))
        return new

    def change_room(self, room_id: str) -> SessionState:
        s = self._state
        if s.onboarding or not self.catalog.has_room(room_id) or room_id == s.current_room:
            return s
        self._install(replace(s, current_room=room_id))
        self._emit(RoomChanged(room_id=room_id))
        return self._state

    def toggle_pause(self) -> SessionState:
        s = self._state
        if s.onboarding or s.over or s.pending_event is not None:
            return s
        self._install(replace(s, running=not s.running))
        return self._state

    def set_tick_rate(self, multiplier: int) -> SessionState:
        # Whole multipliers keep the clock on integer minutes.
        if (isinstance(multiplier, bool) or not isinstance(multiplier, int)
                or multiplier <= 0):
            raise ValueError(f"tick rate must be a positive integer, got {multiplier!r}")
        s = self._state
        if s.onboarding:
            return s
        self._install(replace(s, tick_rate=multiplier))
        return self._state

    def reset(self) -> SessionState:
        self._install(initial_state())
        print("[SESSION] reset")
        self._emit(SessionReset())
        return self._state

    # ── Internals ────────────────────────────────────────────────────

    def _install(self, state: SessionState) -> None:
        self._state = state

    def _emit(self, event) -> None:
        if self.bus is not None:
            self.bus.emit(event)

    def __repr__(self) -> str:
        s = self._state
        status = s.terminal.value if s.terminal is not Terminal.NONE else (
            "running" if s.running else "paused")
        return (f"GameSession(day={s.day}, time={format_time(s.time_of_day)}, "
                f"{status})")
