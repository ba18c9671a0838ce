from __future__ import annotations

import curses

from ..events import Key, KeyEvent
from ..screen import Color, KeyBuffer, ScreenInitError

ESC = 27

# Color -> (curses colour number, bold); -1 is the terminal default.
_COLORS = {
    Color.DEFAULT: (-1, False),
    Color.RED: (curses.COLOR_RED, False),
    Color.BLUE: (curses.COLOR_BLUE, False),
    Color.LIGHT_GREEN: (curses.COLOR_GREEN, True),
    Color.WHITE: (curses.COLOR_WHITE, True),
}

_KEYS = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    ESC: Key.QUIT,
}


def translate_key(code: int) -> KeyEvent:
    return KeyEvent(_KEYS.get(code, Key.OTHER))


class CursesScreen(KeyBuffer):
    """Screen on the controlling terminal.

    curses is not safe to use from two threads, so keys are drained on the
    drawing thread in ``flush`` and handed to ``poll_event`` through the
    key buffer.
    """

    def __init__(self):
        super().__init__()
        try:
            # setupterm raises instead of exiting the process like initscr does.
            curses.setupterm()
            self._win = curses.initscr()
        except curses.error as e:
            raise ScreenInitError(f"failed to init curses: {e}") from e
        self._closed = False

        try:
            self._setup()
        except curses.error as e:
            curses.endwin()
            raise ScreenInitError(f"failed to set up curses: {e}") from e
        self._pairs: dict[tuple[Color, Color], int] = {}

    def _setup(self) -> None:
        curses.noecho()
        curses.cbreak()
        self._win.keypad(True)
        self._win.nodelay(True)
        curses.set_escdelay(25)
        try:
            curses.curs_set(0)
        except curses.error:
            pass  # terminal can't hide the cursor

        self._has_colors = curses.has_colors()
        if self._has_colors:
            curses.start_color()
            curses.use_default_colors()

    def _attr(self, fg: Color, bg: Color) -> int:
        if not self._has_colors:
            return 0
        fg_num, bold = _COLORS[fg]
        bg_num, _ = _COLORS[bg]
        pair = self._pairs.get((fg, bg))
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return curses.A_BOLD if bold else 0
            curses.init_pair(pair, fg_num, bg_num)
            self._pairs[(fg, bg)] = pair
        attr = curses.color_pair(pair)
        if bold:
            attr |= curses.A_BOLD
        return attr

    def size(self) -> tuple[int, int]:
        rows, cols = self._win.getmaxyx()
        return cols, rows

    def clear(self, fg: Color, bg: Color) -> None:
        self._win.bkgdset(" ", self._attr(fg, bg))
        self._win.erase()

    def set_cell(self, x: int, y: int, glyph: str, fg: Color, bg: Color) -> None:
        try:
            self._win.addstr(y, x, glyph, self._attr(fg, bg))
        except curses.error:
            # Off-screen, or the bottom-right cell (cursor can't advance past it).
            pass

    def flush(self) -> None:
        self._win.noutrefresh()
        curses.doupdate()
        while True:
            code = self._win.getch()
            if code == -1:
                break
            self.push(translate_key(code))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._win.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
