from __future__ import annotations

import abc
import logging
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from pathlib import Path

from backlight_step.errors import BrightnessParseError

log = logging.getLogger(__name__)

# Brightness and step counts are unsigned 32-bit values.
U32_MAX = 2**32 - 1


class SysfsStore(abc.ABC):
    """Byte-level access to sysfs attribute files."""

    @abc.abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        raise NotImplementedError

    @abc.abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> None:
        raise NotImplementedError


class FileStore(SysfsStore):
    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        # sysfs attributes take a whole-file overwrite in one write().
        Path(path).write_bytes(data)


@dataclass
class MemoryStore(SysfsStore):
    files: MutableMapping[Path, bytes] = field(default_factory=dict)

    def read_bytes(self, path: Path) -> bytes:
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(path)) from None

    def write_bytes(self, path: Path, data: bytes) -> None:
        self.files[Path(path)] = data


def parse_brightness(raw: bytes, path: str | Path = "<bytes>") -> int:
    # Drop the trailing newline sysfs appends; a single byte is a complete value.
    body = raw[:-1] if len(raw) > 1 else raw
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        raise BrightnessParseError(str(path), raw) from None
    if not text.isascii() or not text.isdigit() or int(text) > U32_MAX:
        raise BrightnessParseError(str(path), raw)
    return int(text)


def read_brightness(path: Path, store: SysfsStore) -> int:
    raw = store.read_bytes(path)
    value = parse_brightness(raw, path)
    log.debug("read %s = %d", path, value)
    return value


def write_brightness(path: Path, value: int, store: SysfsStore) -> None:
    store.write_bytes(path, str(int(value)).encode("ascii"))
    log.debug("wrote %s = %d", path, value)
