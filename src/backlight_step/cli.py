from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Mapping, Sequence

from backlight_step import __version__
from backlight_step.config import ConfigError, default_steps, device_table, load, load_default
from backlight_step.devices import resolve
from backlight_step.errors import BacklightStepError
from backlight_step.stepper import Direction, StepConfig, nudge, parse_total_steps
from backlight_step.system.sysfs import FileStore, SysfsStore

log = logging.getLogger(__name__)

USAGE = """\
Usage: [DEBUG=true] backlight-step [-c CONFIG] keyboard|screen +|- [total_steps]

- 'keyboard' or 'screen' is required (case-insensitive).
- '+' increases brightness, anything else decreases it.
- If 'DEBUG=true' is set, debug information is printed.
- If 'total_steps' is not provided it defaults to 10, meaning 10 presses
  take the brightness from 0 to max.
"""


def debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    environ = os.environ if environ is None else environ
    return environ.get("DEBUG", "").strip().lower() == "true"


def _setup_logging(debug: bool) -> None:
    pkg = logging.getLogger("backlight_step")
    pkg.handlers.clear()
    if debug:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        pkg.addHandler(handler)
        pkg.setLevel(logging.DEBUG)
    else:
        pkg.setLevel(logging.WARNING)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="backlight-step")
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument("-c", "--config", help="YAML config file")
    # Positionals are taken verbatim so a direction such as "-x" is not read as an option.
    ap.add_argument(
        "args",
        nargs=argparse.REMAINDER,
        help="keyboard|screen, then + or -, then optional total_steps (default 10)",
    )
    return ap


def run(
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    store: SysfsStore | None = None,
) -> int:
    """Run one invocation and return the exit code.

    Typed errors propagate to the caller; ``main`` turns them into an exit
    message.
    """

    args = _build_parser().parse_args(argv)
    _setup_logging(debug_enabled(environ))

    if len(args.args) < 2:
        print(USAGE)
        return 0

    # Tokens past total_steps are ignored.
    device, direction = args.args[0], args.args[1]
    total_steps = args.args[2] if len(args.args) > 2 else None

    cfg = load(args.config) if args.config else load_default()
    paths = resolve(device, device_table(cfg))
    step_cfg = StepConfig(
        direction=Direction.from_token(direction),
        total_steps=parse_total_steps(total_steps, default=default_steps(cfg)),
    )

    log.debug("device: %s", device.strip().lower())
    log.debug("is_increase_brightness: %s", step_cfg.direction is Direction.INCREASE)
    log.debug("total_steps: %d", step_cfg.total_steps)

    nudge(paths, step_cfg, FileStore() if store is None else store)
    return 0


def main() -> None:
    try:
        code = run()
    except (BacklightStepError, ConfigError, OSError) as e:
        raise SystemExit(f"backlight-step: {e}") from e
    raise SystemExit(code)
