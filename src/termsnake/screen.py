from __future__ import annotations

import enum
import queue
from typing import Protocol

from .events import KeyEvent


class Color(enum.Enum):
    DEFAULT = "default"
    RED = "red"
    BLUE = "blue"
    LIGHT_GREEN = "light_green"
    WHITE = "white"


class ScreenInitError(RuntimeError):
    """The terminal driver could not be brought up."""


class Screen(Protocol):
    """Terminal-like surface the game draws on and reads keys from.

    ``poll_event`` blocks and is called from a producer thread; every other
    method is only called from the thread running the game loop.
    """

    def size(self) -> tuple[int, int]: ...

    def poll_event(self) -> KeyEvent: ...

    def clear(self, fg: Color, bg: Color) -> None: ...

    def set_cell(self, x: int, y: int, glyph: str, fg: Color, bg: Color) -> None: ...

    def flush(self) -> None: ...

    def close(self) -> None: ...


class KeyBuffer:
    """Hands keys read on the drawing thread to a blocking ``poll_event``.

    Drivers whose input has to be pumped on the thread that owns the display
    read keys during ``flush`` and ``push`` them here.
    """

    def __init__(self):
        self._keys: queue.Queue[KeyEvent] = queue.Queue()

    def push(self, event: KeyEvent) -> None:
        self._keys.put(event)

    def poll_event(self) -> KeyEvent:
        return self._keys.get()
