from __future__ import annotations

import asyncio
import logging
import random
import time

from . import config, render
from .events import Outcome
from .loop import run
from .screen import Screen
from .state import new_game

logger = logging.getLogger(__name__)

DRIVERS = ("curses", "pygame")


def open_screen(driver: str) -> Screen:
    """Bring up a terminal driver; raises ScreenInitError on failure."""
    if driver == "pygame":
        from .drivers.pygame_screen import PygameScreen

        return PygameScreen()
    if driver == "curses":
        from .drivers.curses_screen import CursesScreen

        return CursesScreen()
    raise ValueError(f"unknown driver: {driver}")


def play(
    screen: Screen,
    rng: random.Random,
    tick_interval: float = config.TICK_INTERVAL,
    crash_delay: float | None = None,
) -> Outcome:
    """Run one game on an open screen and close the screen afterwards."""
    if crash_delay is None:
        crash_delay = config.CRASH_EXIT_DELAY
    try:
        width, height = screen.size()
        state = new_game(width, height, rng)
        state, outcome = asyncio.run(run(screen, state, rng, tick_interval))
        if outcome is Outcome.BORDER_CRASH:
            render.draw_game_over(screen, state)
            linger(screen, crash_delay)
    finally:
        screen.close()
    return outcome


def linger(screen: Screen, delay: float) -> None:
    # Keep flushing so a windowed driver keeps pumping its events.
    deadline = time.monotonic() + delay
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return
        time.sleep(min(remaining, config.TICK_INTERVAL))
        screen.flush()
