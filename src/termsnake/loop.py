from __future__ import annotations

import asyncio
import logging
import random
import threading
from typing import Callable

from . import config, render
from .events import TICK, Event, Key, Outcome, Tick
from .logic import eat_consumables, is_border_crash, move_actor, set_heading
from .screen import Screen
from .state import State

logger = logging.getLogger(__name__)


def handle_event(
    state: State,
    event: Event,
    rng: random.Random,
    on_step: Callable[[State], None] | None = None,
) -> tuple[State, Outcome | None]:
    """Service one event and return the next state plus a termination reason.

    ``on_step`` gets the moved state after each tick, before consumables are
    checked. On a non-None outcome the state comes back untouched.
    """
    if isinstance(event, Tick):
        if is_border_crash(state.actor.pos, state.width, state.height):
            return state, Outcome.BORDER_CRASH
        state = move_actor(state)
        if on_step:
            on_step(state)
    elif event.key is Key.QUIT:
        return state, Outcome.QUIT
    else:
        state = set_heading(state, event.key)

    # Runs after key presses too, not only after moves.
    return eat_consumables(state, rng), None


def _pump_input(screen: Screen, loop: asyncio.AbstractEventLoop, events: asyncio.Queue) -> None:
    while True:
        event = screen.poll_event()
        try:
            loop.call_soon_threadsafe(events.put_nowait, event)
        except RuntimeError:
            # Event loop is closed: the game is over and nobody reads keys anymore.
            return


def start_input_producer(screen: Screen, loop: asyncio.AbstractEventLoop, events: asyncio.Queue) -> threading.Thread:
    # Daemon thread, never joined: poll_event may block forever.
    thread = threading.Thread(target=_pump_input, args=(screen, loop, events), name="termsnake-input", daemon=True)
    thread.start()
    return thread


async def _ticker(events: asyncio.Queue, interval: float) -> None:
    loop = asyncio.get_running_loop()
    next_at = loop.time() + interval
    while True:
        await asyncio.sleep(max(0.0, next_at - loop.time()))
        events.put_nowait(TICK)
        next_at += interval
        if next_at < loop.time():
            # Fell behind: drop the missed ticks rather than replaying them.
            next_at = loop.time() + interval


async def run(
    screen: Screen,
    state: State,
    rng: random.Random,
    tick_interval: float = config.TICK_INTERVAL,
) -> tuple[State, Outcome]:
    """Merge key events and ticks into one stream and play until the game ends.

    Both producers feed the same queue, so each source keeps its own order.
    Which one goes first when a key and a tick arrive together is up to the
    scheduler.
    """
    events: asyncio.Queue[Event] = asyncio.Queue()
    start_input_producer(screen, asyncio.get_running_loop(), events)
    ticker = asyncio.create_task(_ticker(events, tick_interval))

    def redraw(s: State) -> None:
        render.draw_state(screen, s)

    logger.info("game started on a %dx%d field, actor at %s", state.width, state.height, tuple(state.actor.pos))
    try:
        while True:
            event = await events.get()
            state, outcome = handle_event(state, event, rng, on_step=redraw)
            if outcome is not None:
                logger.info("game over: %s at %s", outcome.value, tuple(state.actor.pos))
                return state, outcome
    finally:
        ticker.cancel()
