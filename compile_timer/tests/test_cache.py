"""Tests for cache module."""

import os
import struct
import pytest

from compile_timer.cache import (
    CACHE_FILE_NAME,
    PATH_BUF_SIZE,
    RECORD_SIZE,
    CacheFileInfo,
    get_full_file_path,
    read_cache_file_info,
    write_cache_file_info,
)
from compile_timer.errors import (
    CacheCorruptError,
    CacheIOError,
    CacheMissingError,
    PathTooLongError,
)


class TestCacheFileInfo:
    def test_record_is_eight_bytes(self):
        assert RECORD_SIZE == 8
        assert len(CacheFileInfo(stamp=1.5).to_bytes()) == 8

    def test_encoding_is_little_endian_double(self):
        data = CacheFileInfo(stamp=1.0).to_bytes()
        assert data == b"\x00\x00\x00\x00\x00\x00\xf0\x3f"

    def test_from_bytes(self):
        info = CacheFileInfo.from_bytes(struct.pack("<d", 1234.5678))
        assert info.stamp == 1234.5678

    def test_short_record_is_corrupt(self):
        with pytest.raises(CacheCorruptError) as exc:
            CacheFileInfo.from_bytes(b"\x00\x01\x02")
        assert exc.value.expected == 8
        assert exc.value.found == 3

    def test_long_record_is_corrupt(self):
        with pytest.raises(CacheCorruptError):
            CacheFileInfo.from_bytes(b"\x00" * 16)


class TestGetFullFilePath:
    def test_inserts_separator(self):
        assert get_full_file_path("build") == "build" + os.sep + CACHE_FILE_NAME

    def test_keeps_existing_separator(self):
        assert get_full_file_path("build" + os.sep) == "build" + os.sep + CACHE_FILE_NAME

    def test_empty_directory_is_working_directory(self):
        assert get_full_file_path("") == CACHE_FILE_NAME

    def test_longest_accepted_directory(self):
        directory = "d" * (PATH_BUF_SIZE - 2 - len(CACHE_FILE_NAME))
        assert get_full_file_path(directory).endswith(CACHE_FILE_NAME)

    def test_rejects_path_at_limit(self):
        directory = "d" * (PATH_BUF_SIZE - 1 - len(CACHE_FILE_NAME))
        with pytest.raises(PathTooLongError) as exc:
            get_full_file_path(directory)
        assert "too long" in str(exc.value)


class TestReadWrite:
    def test_write_then_read(self, tmp_path):
        path = get_full_file_path(str(tmp_path))
        write_cache_file_info(path, CacheFileInfo(stamp=42.125))
        assert read_cache_file_info(path).stamp == 42.125

    def test_write_truncates(self, tmp_path):
        path = tmp_path / CACHE_FILE_NAME
        path.write_bytes(b"x" * 64)
        write_cache_file_info(str(path), CacheFileInfo(stamp=2.0))
        assert path.stat().st_size == 8

    def test_write_into_missing_directory(self, tmp_path):
        path = str(tmp_path / "missing" / CACHE_FILE_NAME)
        with pytest.raises(CacheIOError) as exc:
            write_cache_file_info(path, CacheFileInfo(stamp=1.0))
        assert not isinstance(exc.value, CacheMissingError)
        assert not (tmp_path / "missing").exists()

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(CacheMissingError) as exc:
            read_cache_file_info(str(tmp_path / CACHE_FILE_NAME))
        assert "start" in exc.value.guidance
        assert str(exc.value) == os.strerror(exc.value.error.errno)

    def test_read_directory_is_io_error(self, tmp_path):
        (tmp_path / CACHE_FILE_NAME).mkdir()
        with pytest.raises(CacheIOError):
            read_cache_file_info(str(tmp_path / CACHE_FILE_NAME))

    def test_read_truncated_file(self, tmp_path):
        path = tmp_path / CACHE_FILE_NAME
        path.write_bytes(b"\x00" * 4)
        with pytest.raises(CacheCorruptError):
            read_cache_file_info(str(path))
