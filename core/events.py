"""core/events.py — Lightweight event bus.

Lets the session *announce* what happened without knowing who listens.
The front-end subscribes to open modals, show toasts, and so on::

    from core.events import EventBus, NarrativeEventTriggered
    bus = EventBus()
    bus.subscribe("NarrativeEventTriggered", open_event_modal)
    session = GameSession(catalog, bus=bus)

And the host drains once per frame::

    bus.drain()          # calls all handlers for pending events

Design rules:
  - Events are plain dataclasses — no behaviour.
  - ``emit()`` is O(1) (just appends).
  - ``drain()`` processes all queued events in FIFO order.
  - Handlers may emit new events; those are processed in the same drain.
  - The session emits only *after* its new state is installed.
"""

from __future__ import annotations
import traceback
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class SessionBegan:
    """The player dismissed the welcome screen; the clock starts."""
    day: int = 1


@dataclass
class SessionReset:
    """The session was replaced by a fresh one."""


@dataclass
class DayStarted:
    """The clock crossed midnight."""
    day: int = 1
    weekday: str = ""


@dataclass
class InteractionUsed:
    """A room object was consumed."""
    object_id: str = ""
    room_id: str = ""


@dataclass
class RoomChanged:
    room_id: str = ""


@dataclass
class NarrativeEventTriggered:
    """An event is now pending; the session is paused until it's answered."""
    event_id: str = ""
    title: str = ""


@dataclass
class NarrativeEventResolved:
    event_id: str = ""
    choice_index: int = 0


@dataclass
class SessionEnded:
    """The session reached a terminal verdict (``"won"`` or ``"lost"``)."""
    verdict: str = ""
    day: int = 1


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

class EventBus:
    """Fire-and-forget event bus owned by the host."""

    def __init__(self):
        self._queue: list[Any] = []
        self._subs: dict[str, list[Callable]] = defaultdict(list)
        self._stats: dict[str, int] = defaultdict(int)

    # ── Public API ───────────────────────────────────────────────────

    def emit(self, event) -> None:
        """Queue an event for processing on next ``drain()``."""
        self._queue.append(event)

    def subscribe(self, event_type: str, handler: Callable) -> None:
        """Register *handler* to receive events of *event_type*.

        *event_type* is the class name, e.g. ``"SessionEnded"``.
        """
        self._subs[event_type].append(handler)

    def unsubscribe(self, event_type: str, handler: Callable) -> None:
        handlers = self._subs.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def drain(self) -> int:
        """Process all queued events.  Returns number processed.

        A failing handler is reported and skipped; the remaining
        handlers and events still run.
        """
        processed = 0
        safety = 1000  # prevent infinite loops
        while self._queue and safety > 0:
            batch = self._queue[:]
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                self._stats[name] += 1
                for handler in list(self._subs.get(name, [])):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            processed += len(batch)
            safety -= 1
        return processed

    def clear(self) -> None:
        """Discard all pending events."""
        self._queue.clear()

    def stats(self) -> dict[str, int]:
        """Return cumulative event counts by type."""
        return dict(self._stats)

    def pending_count(self) -> int:
        """Number of events waiting to be drained."""
        return len(self._queue)

    def __repr__(self) -> str:
        return f"EventBus(pending={len(self._queue)}, subs={len(self._subs)})"
