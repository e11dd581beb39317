"""test_session.py — GameSession operations end to end (headless).

Covers:
1. Initial / reset state, onboarding and begin()
2. The composed tick (order, rollover, loss precedence, win)
3. One-shot interactions, rooms, pause
4. Pending events: pause, resolution, invalid choices
5. Domain events emitted on the bus
6. Clamp invariant over a long seeded random play-through

Run: python test_session.py   (also collected by pytest)
"""
from __future__ import annotations
import sys, traceback, random
from dataclasses import replace

from components import SessionState, Terminal, initial_state
from core.data import Catalog
from core.events import EventBus
from logic.session import GameSession, InvalidChoiceError


CATALOG = Catalog.from_files()


def _quiet() -> float:
    """Random source that never lets an event fire."""
    return 0.99


def _always() -> float:
    """Random source that always fires and always picks the first event."""
    return 0.0


def _started(rng=_quiet, bus=None, **kw) -> GameSession:
    session = GameSession(CATALOG, rng=rng, bus=bus)
    session.begin()
    if kw:
        session._install(replace(session.state, **kw))
    return session


def _close(a: float, b: float, eps: float = 1e-9) -> bool:
    return abs(a - b) < eps


def _with_pending(event_id: str, **kw) -> GameSession:
    state = replace(initial_state(), onboarding=False, running=False,
                    pending_event=CATALOG.event(event_id), **kw)
    return GameSession(CATALOG, rng=_quiet, state=state)


# ════════════════════════════════════════════════════════════════════════
#  Lifecycle
# ════════════════════════════════════════════════════════════════════════

def test_initial_state_literals():
    s = GameSession(CATALOG).state
    assert (s.energy, s.sleep, s.health) == (80, 70, 90)
    assert s.day == 1 and s.time_of_day == 450
    assert s.onboarding is True and s.running is False
    assert s.terminal is Terminal.NONE
    assert s.used_interactions == frozenset()
    assert s.current_room == "bedroom"
    assert s.pending_event is None
    assert s.tick_rate == 1


def test_onboarding_blocks_everything_but_begin():
    session = GameSession(CATALOG, rng=_always)
    before = session.state
    assert session.tick() is before
    assert session.toggle_pause() is before
    assert session.interact("bed") is before
    assert session.change_room("gym") is before
    assert session.set_tick_rate(4) is before
    assert session.state.time_of_day == 450
    assert session.state.used_interactions == frozenset()
    assert session.state.current_room == "bedroom"

    session.begin()
    assert session.state.onboarding is False
    assert session.state.running is True


def test_begin_only_once():
    session = _started()
    session.toggle_pause()
    s = session.state
    assert session.begin() is s
    assert s.running is False


def test_reset_restores_initial_state():
    session = _started(rng=_always, day=5, energy=12, time_of_day=720)
    session.interact("bed")
    session.change_room("gym")
    session.tick()                                   # meal-choice pending
    assert session.state.pending_event is not None
    session.set_tick_rate(4)

    session.reset()
    assert session.state == initial_state()
    assert session.state.pending_event is None


# ════════════════════════════════════════════════════════════════════════
#  Tick
# ════════════════════════════════════════════════════════════════════════

def test_tick_advances_clock_and_decays():
    session = _started(time_of_day=700)              # 11:40, daytime
    session.tick()
    s = session.state
    assert s.time_of_day == 702
    assert _close(s.energy, 79.7) and _close(s.sleep, 69.8) and _close(s.health, 89.9)


def test_first_tick_of_the_game_is_still_night():
    # 07:30 + 2 min = 07:32, inside the 22:00-08:00 window.
    session = _started()
    session.tick()
    s = session.state
    assert s.time_of_day == 452
    assert _close(s.energy, 80.2) and _close(s.sleep, 70.6) and _close(s.health, 90.2)


def test_tick_uses_advanced_time_for_night_window():
    # 21:58 + 2 min = 22:00, already night.
    session = _started(time_of_day=1318, energy=50, sleep=50, health=50)
    session.tick()
    s = session.state
    assert s.time_of_day == 1320
    assert _close(s.energy, 50.2) and _close(s.sleep, 50.6) and _close(s.health, 50.2)


def test_tick_rolls_over_day():
    session = _started(time_of_day=1438)
    session.tick()
    assert session.state.time_of_day == 0
    assert session.state.day == 2


def test_tick_is_noop_when_paused():
    session = _started()
    session.toggle_pause()
    s = session.state
    assert session.tick() is s


def test_loss_beats_win_and_blocks_events():
    session = _started(rng=_always, day=8, energy=0.05, sleep=60, health=60,
                       time_of_day=720)
    session.tick()
    s = session.state
    assert s.terminal is Terminal.LOST
    assert s.running is False
    assert s.pending_event is None


def test_win_on_day_eight():
    session = _started(day=8, energy=60, sleep=60, health=60, time_of_day=900)
    session.tick()
    assert session.state.terminal is Terminal.WON
    assert session.state.running is False


def test_finished_session_is_frozen():
    session = _started(rng=_always, health=0.05, time_of_day=900)
    session.tick()
    s = session.state
    assert s.terminal is Terminal.LOST
    assert session.tick() is s
    assert session.toggle_pause() is s
    assert session.interact("bed") is s
    assert s.running is False


def test_event_fires_during_tick_and_pauses():
    session = _started(rng=_always, time_of_day=718)
    session.tick()                                   # → 12:00, meal time
    s = session.state
    assert s.pending_event is not None and s.pending_event.id == "meal-choice"
    assert s.running is False
    assert session.tick() is s                       # paused until answered


# ════════════════════════════════════════════════════════════════════════
#  Interactions & rooms
# ════════════════════════════════════════════════════════════════════════

def test_interaction_applies_once():
    session = _started()
    session.interact("bed")                          # sleep +30, energy +25
    s = session.state
    assert s.sleep == 100 and s.energy == 100        # clamped
    assert s.health == 90                            # untouched
    assert "bed" in s.used_interactions
    assert session.interact("bed") is s


def test_interaction_only_in_current_room():
    session = _started()
    s = session.state
    assert session.interact("sofa") is s             # living-room object
    assert session.interact("no-such-thing") is s


def test_usage_survives_room_changes():
    session = _started()
    session.interact("wardrobe")
    session.change_room("kitchen")
    session.interact("fridge")
    session.change_room("bedroom")
    s = session.state
    assert session.interact("wardrobe") is s
    assert s.used_interactions == frozenset({"wardrobe", "fridge"})


def test_change_room():
    session = _started()
    session.change_room("gym")
    assert session.state.current_room == "gym"
    s = session.state
    assert session.change_room("attic") is s
    assert [o.id for o, _ in session.room_objects()] == [
        "exercise", "treadmill", "dumbbells", "yoga-mat"]


def test_toggle_pause():
    session = _started()
    session.toggle_pause()
    assert session.state.running is False
    session.toggle_pause()
    assert session.state.running is True


def test_set_tick_rate():
    session = _started()
    session.set_tick_rate(2)
    assert session.tick_interval_ms() == 500
    session.tick()
    assert session.state.time_of_day == 454
    assert isinstance(session.state.time_of_day, int)
    for bad in (0, -1, 1.5, float("nan"), float("inf"), True):
        try:
            session.set_tick_rate(bad)
        except ValueError:
            pass
        else:
            raise AssertionError(f"tick rate {bad} accepted")
    assert session.state.tick_rate == 2


# ════════════════════════════════════════════════════════════════════════
#  Pending events
# ════════════════════════════════════════════════════════════════════════

def test_resolve_applies_choice_and_resumes():
    session = _with_pending("meal-choice", energy=50, sleep=98, health=50)
    session.resolve_event(0)                         # +15 / +5 / +20
    s = session.state
    assert (s.energy, s.sleep, s.health) == (65, 100, 70)
    assert s.pending_event is None
    assert s.running is True


def test_resolve_out_of_range_raises_without_change():
    session = _with_pending("meal-choice")
    before = session.state
    for bad in (3, -1, 99):
        try:
            session.resolve_event(bad)
        except InvalidChoiceError:
            pass
        else:
            raise AssertionError(f"choice {bad} accepted")
        assert session.state is before


def test_resolve_without_pending_is_noop():
    session = _started()
    s = session.state
    assert session.resolve_event(0) is s


def test_pause_toggle_ignored_while_event_pending():
    session = _with_pending("stress-situation")
    s = session.state
    assert session.toggle_pause() is s
    assert s.running is False


# ════════════════════════════════════════════════════════════════════════
#  Bus
# ════════════════════════════════════════════════════════════════════════

def test_session_emits_domain_events():
    bus = EventBus()
    seen: list[str] = []
    for name in ("SessionBegan", "DayStarted", "InteractionUsed", "RoomChanged",
                 "NarrativeEventTriggered", "NarrativeEventResolved",
                 "SessionEnded", "SessionReset"):
        bus.subscribe(name, lambda evt, name=name: seen.append(name))

    session = GameSession(CATALOG, rng=_always, bus=bus)
    session.begin()
    session.interact("bed")
    session.change_room("kitchen")
    session._install(replace(session.state, time_of_day=1438))
    session.tick()                                   # day 2, nothing eligible at 00:00
    session._install(replace(session.state, time_of_day=718))
    session.tick()                                   # meal-choice
    session.resolve_event(2)
    session._install(replace(session.state, health=0.05, time_of_day=900))
    session.tick()                                   # lost
    session.reset()
    bus.drain()

    assert seen == [
        "SessionBegan", "InteractionUsed", "RoomChanged", "DayStarted",
        "NarrativeEventTriggered", "NarrativeEventResolved",
        "SessionEnded", "SessionReset",
    ], seen


# ════════════════════════════════════════════════════════════════════════
#  Clamp invariant
# ════════════════════════════════════════════════════════════════════════

def _in_range(s: SessionState) -> bool:
    return all(0 <= v <= 100 for v in (s.energy, s.sleep, s.health))


def test_stats_stay_in_range_over_long_play():
    rnd = random.Random(1234)
    session = GameSession(CATALOG, rng=random.Random(99).random)
    session.begin()
    all_objects = [o.id for r in CATALOG.rooms for o in r.objects]

    for _ in range(20000):
        s = session.state
        if s.over:
            session.reset()
            session.begin()
        elif s.pending_event is not None:
            session.resolve_event(rnd.randrange(len(s.pending_event.choices)))
        else:
            roll = rnd.random()
            if roll < 0.01:
                session.change_room(rnd.choice(session.catalog.room_ids()))
            elif roll < 0.02:
                session.interact(rnd.choice(all_objects))
            else:
                session.tick()
        assert _in_range(session.state), session.state
        assert 0 <= session.state.time_of_day < 1440
        if session.state.over:
            assert session.state.running is False
        if session.state.pending_event is not None:
            assert session.state.running is False



# ── Runner ───────────────────────────────────────────────────────────

def _run_all() -> int:
    passed = failed = 0
    print("\n=== test_session ===")
    for name, fn in list(globals().items()):
        if not (name.startswith("test_") and callable(fn)):
            continue
        try:
            fn()
        except Exception:
            failed += 1
            print(f"  [FAIL] {name}")
            for line in traceback.format_exc().strip().splitlines():
                print(f"         {line}")
        else:
            passed += 1
            print(f"  [PASS] {name}")
    print(f"\n{'='*50}\n  {passed} passed, {failed} failed\n{'='*50}")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(_run_all())
