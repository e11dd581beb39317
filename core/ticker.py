"""core/ticker.py — Fixed-interval tick driver.

The frame loop runs at whatever FPS pygame gives us; the simulation
wants one tick every ``1000 / tick_rate`` ms.  ``Ticker`` sits between
the two: feed it each frame's ``dt`` and it tells you how many ticks are
due.  It knows nothing about the rules, so the session can be tested
without waiting on a real clock.

    ticker = Ticker()
    for _ in range(ticker.update(dt, session.tick_interval_ms())):
        session.tick()

Stopping the driver (pause, game over, teardown) is the only way to
cancel ticks: ``stop()`` throws away the partial interval so resuming
never fires a burst of catch-up ticks.
"""

from __future__ import annotations


class Ticker:
    """Accumulates frame time and releases whole tick intervals."""

    def __init__(self, max_ticks_per_update: int = 8):
        self._acc_ms: float = 0.0
        self.max_ticks_per_update = max_ticks_per_update

    def update(self, dt: float, interval_ms: float) -> int:
        """Add *dt* seconds; return how many ticks of *interval_ms* elapsed.

        At most ``max_ticks_per_update`` are released per call (a long
        stall, e.g. dragging the window, drops the excess).
        """
        if interval_ms <= 0:
            raise ValueError(f"tick interval must be positive, got {interval_ms}")
        self._acc_ms += dt * 1000.0
        due = int(self._acc_ms // interval_ms)
        if due <= 0:
            return 0
        self._acc_ms -= due * interval_ms
        if due > self.max_ticks_per_update:
            due = self.max_ticks_per_update
            self._acc_ms = 0.0
        return due

    def stop(self) -> None:
        """Discard any partially elapsed interval."""
        self._acc_ms = 0.0
