"""Elapsed-time measurement across two command invocations."""

from .cache import CACHE_FILE_NAME, CacheFileInfo
from .clocks import FakeClock, MonotonicClock
from .config import TimerConfig
from .timer import start_timer, stop_timer, run_mode

__version__ = "0.1.0"

__all__ = [
    "CACHE_FILE_NAME",
    "CacheFileInfo",
    "FakeClock",
    "MonotonicClock",
    "TimerConfig",
    "start_timer",
    "stop_timer",
    "run_mode",
]
