"""core/constants.py — Shared constants used across the codebase.

Centralises the game rules so there's exactly one place to read them.

Unit System
-----------
    Time (game)        min    (game-minutes since 00:00, 0..1439)
    Time (real)        ms     (wall-clock milliseconds per tick)
    Vital stats        pts    (0..100, clamped on every write)
    Days               —      (1-based counter, day 1 is a Monday)

Game Time Scale
~~~~~~~~~~~~~~~
One tick advances ``MINUTES_PER_TICK * tick_rate`` game-minutes and
lasts ``BASE_TICK_MS / tick_rate`` real milliseconds, so a full day
takes 720 ticks (12 real minutes) at rate 1.

Night Window
~~~~~~~~~~~~
22:00 → 08:00, inclusive at both ends (``time >= 1320 or time <= 480``).
Sleeping hours regenerate on top of the constant daytime decay:

              energy   sleep   health
    decay      -0.3    -0.2    -0.1
    regen      +0.5    +0.8    +0.3
    net night  +0.2    +0.6    +0.2
"""

# ── Stat range ──────────────────────────────────────────────────────
STAT_MIN: float = 0.0
STAT_MAX: float = 100.0
STAT_NAMES: tuple[str, ...] = ("energy", "sleep", "health")

# ── Initial session values ──────────────────────────────────────────
START_ENERGY: float = 80.0
START_SLEEP: float = 70.0
START_HEALTH: float = 90.0
START_DAY: int = 1
START_TIME: int = 450              # 07:30
START_ROOM: str = "bedroom"

# ── Clock ───────────────────────────────────────────────────────────
MINUTES_PER_DAY: int = 1440
MINUTES_PER_TICK: int = 2          # at tick_rate 1
BASE_TICK_MS: float = 1000.0       # at tick_rate 1

WEEKDAYS: tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday",
    "Friday", "Saturday", "Sunday",
)

# ── Vitals (per tick) ───────────────────────────────────────────────
DECAY = {"energy": 0.3, "sleep": 0.2, "health": 0.1}
NIGHT_REGEN = {"energy": 0.5, "sleep": 0.8, "health": 0.3}
NIGHT_START: int = 1320            # 22:00
NIGHT_END: int = 480               # 08:00

# ── Outcome ─────────────────────────────────────────────────────────
WIN_AFTER_DAY: int = 7             # win is checked on day 8 onwards
WIN_STAT_FLOOR: float = 50.0       # every stat must be strictly above

# ── Narrative events ────────────────────────────────────────────────
EVENT_FIRE_CHANCE: float = 0.2     # per running tick, before eligibility
MIN_CHOICES: int = 2
MAX_CHOICES: int = 3

# ── Rooms ───────────────────────────────────────────────────────────
MIN_ROOM_OBJECTS: int = 4
MAX_ROOM_OBJECTS: int = 5
