from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from backlight_step.errors import InvalidSelectorError


class Device(str, enum.Enum):
    KEYBOARD = "keyboard"
    SCREEN = "screen"


@dataclass(frozen=True)
class DevicePaths:
    max_brightness: Path
    brightness: Path

    @classmethod
    def from_sysfs_dir(cls, sysfs_dir: str | Path) -> DevicePaths:
        d = Path(sysfs_dir)
        return cls(max_brightness=d / "max_brightness", brightness=d / "brightness")


DEVICE_TABLE: dict[str, DevicePaths] = {
    Device.SCREEN.value: DevicePaths.from_sysfs_dir("/sys/class/backlight/intel_backlight"),
    Device.KEYBOARD.value: DevicePaths.from_sysfs_dir("/sys/class/leds/smc::kbd_backlight"),
}


def resolve(token: str, table: Mapping[str, DevicePaths] | None = None) -> DevicePaths:
    """Look up the path pair for a device token (case-insensitive).

    ``table`` defaults to the built-in table; the config layer passes a merged
    copy when extra devices are configured.
    """

    table = DEVICE_TABLE if table is None else table
    key = token.strip().lower()
    try:
        return table[key]
    except KeyError:
        raise InvalidSelectorError(token) from None
