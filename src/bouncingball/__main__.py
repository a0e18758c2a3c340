"""Command-line interface."""
import argparse
import logging
import sys
from typing import Optional, Sequence

from bouncingball.config import AppConfig, DEFAULT_HEIGHT, DEFAULT_WIDTH, UPDATE_RATE

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bouncingball", description="A ball bouncing in a resizable box.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="initial canvas width")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="initial canvas height")
    parser.add_argument("--fps", type=int, default=UPDATE_RATE, help="simulation steps per second")
    parser.add_argument("--seed", type=int, default=None, help="seed for the initial position and heading")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> tuple[AppConfig, argparse.Namespace]:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = AppConfig(width=args.width, height=args.height, update_rate=args.fps, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))
    return config, args


def run(argv: Optional[Sequence[str]] = None) -> int:
    config, args = parse_config(argv)

    # Qt is imported only once the arguments are known to be valid
    from bouncingball.main import main
    return main(config, log_level=getattr(logging, args.log_level), log_file=args.log_file)


if __name__ == "__main__":
    sys.exit(run())
