"""Cache file holding the stamp captured by ``start``."""

import os
import struct
from dataclasses import dataclass
from pathlib import Path

from .errors import (
    CacheCorruptError,
    CacheIOError,
    CacheMissingError,
    PathTooLongError,
)


CACHE_FILE_NAME = "compile_timer_cache"
PATH_BUF_SIZE = 128

# One little-endian IEEE-754 double, no header
RECORD_FORMAT = "<d"
RECORD_SIZE = struct.calcsize(RECORD_FORMAT)


@dataclass
class CacheFileInfo:
    """The persisted record: a single stamp in seconds."""
    stamp: float

    def to_bytes(self) -> bytes:
        return struct.pack(RECORD_FORMAT, self.stamp)

    @classmethod
    def from_bytes(cls, data: bytes, path: str = "") -> "CacheFileInfo":
        if len(data) != RECORD_SIZE:
            raise CacheCorruptError(path, RECORD_SIZE, len(data))
        (stamp,) = struct.unpack(RECORD_FORMAT, data)
        return cls(stamp=stamp)


def _separators() -> tuple[str, ...]:
    if os.altsep:
        return (os.sep, os.altsep)
    return (os.sep,)


def get_full_file_path(directory: str) -> str:
    """Join the directory and the cache file name.

    A separator is inserted only when the directory does not already end
    with one. Raises PathTooLongError when the result would not fit in
    PATH_BUF_SIZE.
    """
    if len(directory) + len(CACHE_FILE_NAME) >= PATH_BUF_SIZE - 1:
        raise PathTooLongError(directory, PATH_BUF_SIZE)

    # Empty directory means the working directory
    if not directory or directory.endswith(_separators()):
        return directory + CACHE_FILE_NAME
    return directory + os.sep + CACHE_FILE_NAME


def write_cache_file_info(file_path: str, info: CacheFileInfo):
    """Truncate or create the cache file and write the record."""
    try:
        with open(file_path, "wb") as f:
            f.write(info.to_bytes())
    except OSError as e:
        raise CacheIOError(file_path, e) from e


def read_cache_file_info(file_path: str) -> CacheFileInfo:
    """Read back the record written by write_cache_file_info."""
    try:
        data = Path(file_path).read_bytes()
    except FileNotFoundError as e:
        raise CacheMissingError(file_path, e) from e
    except OSError as e:
        raise CacheIOError(file_path, e) from e
    return CacheFileInfo.from_bytes(data, path=file_path)
