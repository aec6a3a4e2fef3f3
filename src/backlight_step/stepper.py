from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from backlight_step.devices import DevicePaths
from backlight_step.errors import StepCountError
from backlight_step.system.sysfs import U32_MAX, SysfsStore, read_brightness, write_brightness

log = logging.getLogger(__name__)

DEFAULT_TOTAL_STEPS = 10


class Direction(enum.Enum):
    INCREASE = "+"
    DECREASE = "-"

    @classmethod
    def from_token(cls, token: str | None) -> Direction:
        # Only an explicit "+" increases; anything else, missing included, decreases.
        if token is not None and token.strip() == "+":
            return cls.INCREASE
        return cls.DECREASE


@dataclass(frozen=True)
class StepConfig:
    direction: Direction
    total_steps: int = DEFAULT_TOTAL_STEPS

    def __post_init__(self) -> None:
        if self.total_steps <= 0:
            raise StepCountError(str(self.total_steps))


@dataclass(frozen=True)
class Adjustment:
    max_brightness: int
    current: int
    step: int
    new: int


def parse_total_steps(value: str | None, default: int = DEFAULT_TOTAL_STEPS) -> int:
    if value is None:
        return default
    text = value.strip()
    if not text.isascii() or not text.isdigit() or not 0 < int(text) <= U32_MAX:
        raise StepCountError(value)
    return int(text)


def step_size(max_brightness: int, total_steps: int) -> int:
    return max_brightness // total_steps


def next_brightness(current: int, max_brightness: int, cfg: StepConfig) -> int:
    """Return the brightness one step away from ``current``, clamped to [0, max]."""

    step = step_size(max_brightness, cfg.total_steps)
    if cfg.direction is Direction.INCREASE:
        return min(current + step, max_brightness)
    return max(current - step, 0)


def nudge(paths: DevicePaths, cfg: StepConfig, store: SysfsStore) -> Adjustment:
    max_brightness = read_brightness(paths.max_brightness, store)
    log.debug("max_brightness: %d", max_brightness)

    current = read_brightness(paths.brightness, store)
    log.debug("current_brightness: %d", current)

    step = step_size(max_brightness, cfg.total_steps)
    new = next_brightness(current, max_brightness, cfg)
    log.debug("step: %d", step)
    log.debug("new_brightness: %d", new)

    write_brightness(paths.brightness, new, store)
    log.debug("Set new brightness value %d successfully.", new)
    return Adjustment(max_brightness=max_brightness, current=current, step=step, new=new)
