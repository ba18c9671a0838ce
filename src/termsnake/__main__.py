from __future__ import annotations

import argparse
import logging
import random
import time

from .game import DRIVERS, open_screen, play
from .screen import ScreenInitError

logger = logging.getLogger("termsnake")


def _setup_logging(log_file: str | None, level: str) -> None:
    # The terminal belongs to the game while it runs; without a log file
    # only warnings and errors go to stderr.
    if log_file is None:
        level = max(logging.WARNING, logging.getLevelName(level))
    logging.basicConfig(
        filename=log_file,
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="termsnake", description="Single-cell snake on a wrapping terminal field.")
    parser.add_argument(
        "--driver",
        choices=DRIVERS,
        default="curses",
        help="Terminal backend (curses=real terminal, pygame=window of character cells).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: wall clock).")
    parser.add_argument("--log-file", default=None, help="Write logs to this file.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
    )
    args = parser.parse_args(argv)

    _setup_logging(args.log_file, args.log_level)

    seed = args.seed if args.seed is not None else time.time_ns()
    rng = random.Random(seed)

    try:
        screen = open_screen(args.driver)
    except ScreenInitError as e:
        logger.critical("failed to init %s driver: %s", args.driver, e)
        return 1

    logger.info("driver=%s seed=%d", args.driver, seed)
    outcome = play(screen, rng)
    logger.info("exiting after %s", outcome.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
