from __future__ import annotations

from pathlib import Path

import pytest

from backlight_step.errors import BrightnessParseError
from backlight_step.system.sysfs import (
    FileStore,
    MemoryStore,
    parse_brightness,
    read_brightness,
    write_brightness,
)


def test_trailing_newline_is_dropped() -> None:
    assert parse_brightness(b"150\n") == 150


def test_single_byte_is_kept() -> None:
    assert parse_brightness(b"0") == 0
    assert parse_brightness(b"7") == 7


def test_u32_max_is_accepted() -> None:
    assert parse_brightness(b"4294967295\n") == 4294967295


@pytest.mark.parametrize(
    "raw",
    [b"", b"\n", b"abc\n", b"-5\n", b"\xff\xfe\n", b"12 \n", b"4294967296\n"],
)
def test_invalid_content_raises_parse_error(raw: bytes) -> None:
    with pytest.raises(BrightnessParseError):
        parse_brightness(raw, "/sys/x/brightness")


def test_parse_error_names_path() -> None:
    with pytest.raises(BrightnessParseError, match="/sys/x/brightness"):
        parse_brightness(b"oops\n", "/sys/x/brightness")


def test_file_store_roundtrip(tmp_path: Path) -> None:
    (tmp_path / "brightness").write_bytes(b"42\n")
    store = FileStore()
    assert read_brightness(tmp_path / "brightness", store) == 42

    write_brightness(tmp_path / "brightness", 43, store)
    assert (tmp_path / "brightness").read_bytes() == b"43"


def test_missing_file_surfaces_os_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_brightness(tmp_path / "nope", FileStore())


def test_memory_store_missing_path() -> None:
    with pytest.raises(FileNotFoundError):
        read_brightness(Path("/sys/missing"), MemoryStore())
