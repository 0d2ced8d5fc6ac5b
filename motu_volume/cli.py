"""
Step the volume of a MOTU interface channel.

Usage:
  motu-volume [options] <device> <command>

Commands:
  mute              engage mute on the device
  inc, increment    raise the gain one step
  dec, decrement    lower the gain one step

Examples:
  motu-volume main inc
  motu-volume --address 192.168.1.20 computer mute

"""
# ruff: noqa: T201

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import NoReturn

from .config import Config, load_config
from .connection import MotuConnection
from .const import DEFAULT_TIMEOUT
from .controller import MotuController
from .errors import MotuVolumeError, UserInputError

_LOGGER = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors like any other user error."""

    def error(self, message: str) -> NoReturn:
        raise UserInputError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="motu-volume",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("device", nargs="?", help="device name (e.g. main)")
    parser.add_argument("command", nargs="?", help="mute, inc or dec")
    parser.add_argument(
        "--address", help="MOTU interface address (default: from config)"
    )
    parser.add_argument("--config", help="JSON config file with extra devices")
    parser.add_argument(
        "--no-sound",
        action="store_true",
        help="don't play the confirmation sound after a volume change",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"HTTP timeout seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


async def _run(args: argparse.Namespace, config: Config) -> float:
    address = args.address or config.address
    async with MotuConnection(address, timeout=args.timeout) as connection:
        controller = MotuController(
            connection,
            config.devices,
            sound=None if args.no_sound else config.sound,
        )
        return await controller.run(args.device, args.command)


def main(argv: list[str]) -> int:
    """Run a single device command and return the process exit status."""
    try:
        args = _build_parser().parse_args(argv)
    except UserInputError as err:
        print(err)
        return 1
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.device is None or args.command is None:
        print("Not enough arguments")
        return 1

    try:
        config = load_config(args.config)
        value = asyncio.run(_run(args, config))
    except UserInputError as err:
        print(err)
        return 1
    except MotuVolumeError as err:
        _LOGGER.debug("Command failed", exc_info=True)
        print(f"Error: {err}")
        return 1

    _LOGGER.debug("Wrote %f", value)
    return 0


def run() -> None:
    """Console script entry point."""
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":  # pragma: no cover
    run()
