from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from backlight_step.devices import DEVICE_TABLE, DevicePaths
from backlight_step.paths import default_config_path
from backlight_step.stepper import DEFAULT_TOTAL_STEPS
from backlight_step.system.sysfs import U32_MAX


class ConfigError(ValueError):
    pass


def load(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ConfigError(f"{p}: not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{p}: invalid YAML: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    validate(data)
    return data


def load_default() -> dict[str, Any]:
    """Load the user config if one exists, else return an empty config."""

    p = default_config_path()
    if not p.is_file():
        return {}
    return load(p)


def validate(cfg: dict[str, Any]) -> None:
    if "default_steps" in cfg:
        steps = cfg["default_steps"]
        if isinstance(steps, bool) or not isinstance(steps, int) or not 0 < steps <= U32_MAX:
            raise ConfigError(f"default_steps must be a positive integer: {steps!r}")

    devices = cfg.get("devices", {})
    if not isinstance(devices, dict):
        raise ConfigError("devices must be a mapping")

    for name, entry in devices.items():
        if not isinstance(entry, dict):
            raise ConfigError(f"devices.{name} must be a mapping")
        if "sysfs_dir" in entry:
            keys = ["sysfs_dir"]
        elif "max_brightness" in entry and "brightness" in entry:
            keys = ["max_brightness", "brightness"]
        else:
            raise ConfigError(
                f"devices.{name} needs sysfs_dir, or both max_brightness and brightness"
            )
        for key in keys:
            if entry[key] is None or not str(entry[key]).strip():
                raise ConfigError(f"devices.{name}.{key} must be a non-empty path")


def default_steps(cfg: dict[str, Any]) -> int:
    return int(cfg.get("default_steps", DEFAULT_TOTAL_STEPS))


def device_table(cfg: dict[str, Any]) -> dict[str, DevicePaths]:
    table = dict(DEVICE_TABLE)
    for name, entry in cfg.get("devices", {}).items():
        if "sysfs_dir" in entry:
            paths = DevicePaths.from_sysfs_dir(str(entry["sysfs_dir"]).strip())
        else:
            paths = DevicePaths(
                max_brightness=Path(str(entry["max_brightness"]).strip()),
                brightness=Path(str(entry["brightness"]).strip()),
            )
        table[str(name).strip().lower()] = paths
    return table
