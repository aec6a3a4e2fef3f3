from __future__ import annotations


class BacklightStepError(Exception):
    pass


class InvalidSelectorError(BacklightStepError, ValueError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Unsupported device: {token!r} (expected keyboard or screen)")
        self.token = token


class StepCountError(BacklightStepError, ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"total_steps must be a positive integer, got {value!r}")
        self.value = value


class BrightnessParseError(BacklightStepError, ValueError):
    def __init__(self, path: str, raw: bytes) -> None:
        super().__init__(f"{path}: not a brightness value: {raw!r}")
        self.path = path
        self.raw = raw
