"""Error types raised by the timer."""

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2
EXIT_CORRUPT = 3


class TimerError(Exception):
    """Base error; carries the exit code used in strict mode."""
    exit_code: int = EXIT_IO_ERROR
    guidance: str | None = None


class UsageError(TimerError):
    exit_code = EXIT_USAGE


class InvalidModeError(UsageError):
    def __init__(self, mode: str):
        super().__init__("Mode is invalid.")
        self.mode = mode


class PathTooLongError(UsageError):
    def __init__(self, directory: str, limit: int):
        super().__init__(
            f"Directory path provided is too long, only supporting "
            f"{limit} - CACHE_FILE_NAME length characters."
        )
        self.directory = directory
        self.limit = limit


class ConfigError(UsageError):
    pass


class CacheIOError(TimerError):
    """OS-level failure reading or writing the cache file."""

    def __init__(self, path, error: OSError):
        super().__init__(error.strerror or str(error))
        self.path = path
        self.error = error


class CacheMissingError(CacheIOError):
    guidance = (
        "The directory doesn't contain a cache file - Make sure you run the "
        "program with 'start' before using 'stop', and that the directory "
        "exists; this program will not create it."
    )


class CacheCorruptError(TimerError):
    exit_code = EXIT_CORRUPT

    def __init__(self, path, expected: int, found: int):
        super().__init__(
            f"Cache file is corrupt: expected {expected} bytes, found {found}."
        )
        self.path = path
        self.expected = expected
        self.found = found
