"""
scheduler.py - Fixed-period tick scheduling.

The scheduler has no clock of its own: the main loop reports elapsed frame
time through update(dt) and the scheduler decides whether a tick is due.
Everything runs on the caller's thread, so a tick always finishes before
the next update() can start another.
"""

from typing import Callable


class TickScheduler:

    def __init__(self, callback: Callable[[], None]):
        self._callback = callback
        self._period: float = 0.0
        self._elapsed: float = 0.0
        self._active: bool = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def period(self) -> float:
        return self._period

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def start(self, period: float) -> None:
        if period <= 0:
            raise ValueError(f"tick period must be positive, got {period}")
        self._period = period
        self._elapsed = 0.0
        self._active = True

    def cancel(self) -> None:
        """Drop any pending tick. Safe to call when already cancelled."""
        self._active = False
        self._elapsed = 0.0

    def reschedule(self, period: float) -> None:
        self.cancel()
        self.start(period)

    def update(self, dt: float) -> bool:
        """Add dt to the clock; fire at most one tick. Returns True if it fired."""
        if not self._active:
            return False
        self._elapsed += dt
        if self._elapsed < self._period:
            return False
        self._elapsed -= self._period
        # A long frame leaves no backlog of ticks behind it.
        if self._elapsed >= self._period:
            self._elapsed = 0.0
        self._callback()
        return True
