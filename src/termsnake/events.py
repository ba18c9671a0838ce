from __future__ import annotations

import enum
from typing import NamedTuple, Union


class Key(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    OTHER = "other"


class KeyEvent(NamedTuple):
    key: Key


class Tick(NamedTuple):
    pass


TICK = Tick()

Event = Union[KeyEvent, Tick]


class Outcome(enum.Enum):
    QUIT = "quit"
    BORDER_CRASH = "border_crash"
