"""Monotonic clock sources for the timer."""

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float: ...


class MonotonicClock:
    """Clock backed by the high-resolution performance counter."""

    # perf_counter_ns ticks are nanoseconds
    frequency: int = 1_000_000_000

    def ticks(self) -> int:
        return time.perf_counter_ns()

    def now(self) -> float:
        """Get the current stamp in seconds (ticks / frequency)."""
        return self.ticks() / float(self.frequency)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self._now = start

    def advance(self, seconds: float):
        self._now += seconds

    def now(self) -> float:
        return self._now
