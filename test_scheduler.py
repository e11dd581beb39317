"""test_scheduler.py — Narrative event eligibility and selection.

Covers:
1. Every eligibility predicate at its boundaries
2. Gating: no event (and no random draw) while over / paused / onboarding
3. The 20 % fire roll, uniform pick, empty eligible set

Random sources are fixed sequences so every outcome is deterministic.

Run: python test_scheduler.py   (also collected by pytest)
"""
from __future__ import annotations
import sys, traceback
from dataclasses import replace

from components import SessionState, Terminal, initial_state
from core.data import Catalog
from logic import conditions as c
from logic.scheduler import maybe_trigger, eligible_events, pick


CATALOG = Catalog.from_files()


def _seq(*values: float):
    """Random source that returns *values* in order, then fails loudly."""
    it = iter(values)

    def rng() -> float:
        try:
            return next(it)
        except StopIteration:
            raise AssertionError("random source drawn more often than expected")
    return rng


def _never():
    def rng() -> float:
        raise AssertionError("random source must not be drawn")
    return rng


def _running(**kw) -> SessionState:
    return replace(initial_state(), onboarding=False, running=True, **kw)


def _ids(events) -> list[str]:
    return [e.id for e in events]


# ════════════════════════════════════════════════════════════════════════
#  Predicates
# ════════════════════════════════════════════════════════════════════════

def test_low_energy_morning():
    assert c.low_energy_morning(_running(energy=29, time_of_day=420))
    assert c.low_energy_morning(_running(energy=29, time_of_day=600))
    assert not c.low_energy_morning(_running(energy=30, time_of_day=500))
    assert not c.low_energy_morning(_running(energy=10, time_of_day=601))


def test_afternoon_slump():
    assert c.afternoon_slump(_running(sleep=39, time_of_day=780))
    assert c.afternoon_slump(_running(sleep=39, time_of_day=960))
    assert not c.afternoon_slump(_running(sleep=40, time_of_day=800))
    assert not c.afternoon_slump(_running(sleep=10, time_of_day=779))


def test_late_night_decision():
    assert c.late_night_decision(_running(sleep=49, time_of_day=1380))
    assert not c.late_night_decision(_running(sleep=50, time_of_day=1400))
    assert not c.late_night_decision(_running(sleep=10, time_of_day=1379))


def test_weekend_temptation():
    assert c.weekend_temptation(_running(day=6, time_of_day=1080))
    assert c.weekend_temptation(_running(day=7, time_of_day=1200))
    assert c.weekend_temptation(_running(day=14, time_of_day=1300))
    assert not c.weekend_temptation(_running(day=5, time_of_day=1300))
    assert not c.weekend_temptation(_running(day=6, time_of_day=1079))


def test_stress_situation():
    assert c.stress_situation(_running(health=39.9))
    assert not c.stress_situation(_running(health=40))


def test_exercise_motivation():
    assert c.exercise_motivation(_running(energy=61, health=69))
    assert not c.exercise_motivation(_running(energy=60, health=50))
    assert not c.exercise_motivation(_running(energy=90, health=70))


def test_meal_choice_has_two_windows():
    for t in (720, 750, 780, 1080, 1140):
        assert c.meal_choice(_running(time_of_day=t)), t
    for t in (719, 781, 1079, 1141):
        assert not c.meal_choice(_running(time_of_day=t)), t


def test_screen_time():
    assert c.screen_time(_running(time_of_day=1200, sleep=59))
    assert not c.screen_time(_running(time_of_day=1199, sleep=10))
    assert not c.screen_time(_running(time_of_day=1300, sleep=60))


def test_hydration_reminder():
    assert c.hydration_reminder(_running(health=79, energy=49))
    assert not c.hydration_reminder(_running(health=80, energy=10))
    assert not c.hydration_reminder(_running(health=10, energy=50))


def test_social_interaction():
    assert c.social_interaction(_running(health=59, time_of_day=600))
    assert c.social_interaction(_running(health=59, time_of_day=1200))
    assert not c.social_interaction(_running(health=60, time_of_day=900))
    assert not c.social_interaction(_running(health=10, time_of_day=1201))


def test_every_catalog_event_has_its_predicate():
    assert len(CATALOG.events) == 10
    for evt in CATALOG.events:
        assert evt.condition is c.get_condition(evt.id), evt.id


# ════════════════════════════════════════════════════════════════════════
#  Gating
# ════════════════════════════════════════════════════════════════════════

def test_no_event_when_session_is_over():
    for verdict in (Terminal.LOST, Terminal.WON):
        s = _running(time_of_day=720, terminal=verdict)
        assert maybe_trigger(s, CATALOG.events, _never()) is s


def test_no_event_while_onboarding():
    s = replace(initial_state(), running=True, time_of_day=720)   # onboarding=True
    assert maybe_trigger(s, CATALOG.events, _never()) is s


def test_no_event_while_paused_or_pending():
    s = replace(_running(time_of_day=720), running=False)
    assert maybe_trigger(s, CATALOG.events, _never()) is s
    pending = replace(s, pending_event=CATALOG.event("meal-choice"))
    assert maybe_trigger(pending, CATALOG.events, _never()) is pending


# ════════════════════════════════════════════════════════════════════════
#  Firing
# ════════════════════════════════════════════════════════════════════════

def test_roll_at_or_above_chance_skips():
    s = _running(time_of_day=720)        # meal-choice is eligible
    for sample in (0.2, 0.5, 0.81, 0.999):
        assert maybe_trigger(s, CATALOG.events, _seq(sample)) is s, sample


def test_successful_roll_sets_pending_and_pauses():
    s = _running(time_of_day=720)
    assert _ids(eligible_events(s, CATALOG.events)) == ["meal-choice"]
    out = maybe_trigger(s, CATALOG.events, _seq(0.1, 0.0))
    assert out.pending_event is not None
    assert out.pending_event.id == "meal-choice"
    assert out.running is False
    # stats untouched by the trigger itself
    assert (out.energy, out.sleep, out.health) == (s.energy, s.sleep, s.health)


def test_successful_roll_with_nothing_eligible_fires_nothing():
    s = _running(time_of_day=900)        # 15:00, healthy: nothing applies
    assert eligible_events(s, CATALOG.events) == []
    assert maybe_trigger(s, CATALOG.events, _seq(0.0)) is s


def test_pick_is_uniform_over_eligible_events():
    s = _running(time_of_day=1390, sleep=45)
    eligible = eligible_events(s, CATALOG.events)
    assert _ids(eligible) == ["late-night-decision", "screen-time"]

    first = maybe_trigger(s, CATALOG.events, _seq(0.1, 0.3))
    assert first.pending_event.id == "late-night-decision"
    second = maybe_trigger(s, CATALOG.events, _seq(0.1, 0.6))
    assert second.pending_event.id == "screen-time"


def test_pick_never_indexes_past_the_end():
    events = list(CATALOG.events[:3])
    assert pick(events, lambda: 0.9999999999).id == events[-1].id
    assert pick(events, lambda: 0.0).id == events[0].id


# ── Runner ───────────────────────────────────────────────────────────

def _run_all() -> int:
    passed = failed = 0
    print("\n=== test_scheduler ===")
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
