"""The start and stop operations."""

from dataclasses import dataclass

from .cache import (
    CacheFileInfo,
    get_full_file_path,
    read_cache_file_info,
    write_cache_file_info,
)
from .clocks import Clock, MonotonicClock
from .config import TimerConfig
from .errors import InvalidModeError


MODES = ("start", "stop")


@dataclass
class StopResult:
    file_path: str
    stored: float
    now: float

    @property
    def elapsed(self) -> float:
        return self.now - self.stored


def write_stamp(file_path: str, clock: Clock) -> str:
    """Write the current stamp to an already resolved cache path."""
    write_cache_file_info(file_path, CacheFileInfo(stamp=clock.now()))
    return file_path


def read_stamp(file_path: str, clock: Clock) -> StopResult:
    info = read_cache_file_info(file_path)
    # Clock is read after the file so the read falls inside the interval
    return StopResult(file_path=file_path, stored=info.stamp, now=clock.now())


def start_timer(directory: str, clock: Clock) -> str:
    """Write the current stamp into the directory's cache file.

    Returns the path written.
    """
    return write_stamp(get_full_file_path(directory), clock)


def stop_timer(directory: str, clock: Clock) -> StopResult:
    """Read the stored stamp and measure against the clock."""
    return read_stamp(get_full_file_path(directory), clock)


def format_elapsed(seconds: float, precision: int = 4) -> str:
    return f"{seconds:.{precision}f}s"


def run_mode(
    mode: str,
    directory: str,
    clock: Clock | None = None,
    config: TimerConfig | None = None,
):
    """Run one invocation and print its output."""
    clock = clock or MonotonicClock()
    config = config or TimerConfig()

    # Path length is checked before the mode, so an oversized path wins
    file_path = get_full_file_path(directory)

    if mode not in MODES:
        raise InvalidModeError(mode)

    if config.verbose:
        print(f"Cache file: {file_path}")

    if mode == "start":
        written = write_stamp(file_path, clock)
        print(f"Cache file written: {written}")
    else:
        result = read_stamp(file_path, clock)
        if config.verbose:
            print(f"Stored stamp: {result.stored}")
            print(f"Current stamp: {result.now}")
        print(format_elapsed(result.elapsed, config.precision))
