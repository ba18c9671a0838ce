from __future__ import annotations

import queue
import random

import pytest

from termsnake.coords import Coord
from termsnake.events import Key, KeyEvent
from termsnake.state import Actor, Consumable, State


class FakeScreen:
    """Records drawing and replays scripted keys, then blocks forever."""

    def __init__(self, width: int = 10, height: int = 10, keys=()):
        self.width, self.height = width, height
        self._keys: queue.Queue[KeyEvent] = queue.Queue()
        for key in keys:
            self._keys.put(KeyEvent(key))
        self.cells: dict[tuple[int, int], tuple] = {}
        self.clears: list[tuple] = []
        self.frames: list[dict] = []
        self.closed = 0

    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def poll_event(self) -> KeyEvent:
        return self._keys.get()

    def clear(self, fg, bg) -> None:
        self.clears.append((fg, bg))
        self.cells.clear()

    def set_cell(self, x, y, glyph, fg, bg) -> None:
        self.cells[(x, y)] = (glyph, fg, bg)

    def flush(self) -> None:
        self.frames.append(dict(self.cells))

    def close(self) -> None:
        self.closed += 1


def make_state(
    actor=(5, 5),
    heading=(1, 0),
    apple=(2, 7),
    energy=(7, 2),
    width: int = 10,
    height: int = 10,
) -> State:
    return State(
        actor=Actor(Coord(*actor)),
        heading=Coord(*heading),
        apple=Consumable("apple", Coord(*apple)),
        energy=Consumable("energy", Coord(*energy)),
        width=width,
        height=height,
    )


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def quit_screen() -> FakeScreen:
    return FakeScreen(keys=[Key.QUIT])
