from __future__ import annotations

import pygame

from .. import config
from ..events import Key, KeyEvent
from ..screen import Color, KeyBuffer, ScreenInitError

DEFAULT_FG = (192, 192, 192)
DEFAULT_BG = (0, 0, 0)

_RGB = {
    Color.RED: (205, 49, 49),
    Color.BLUE: (36, 114, 200),
    Color.LIGHT_GREEN: (35, 209, 139),
    Color.WHITE: (255, 255, 255),
}

_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_ESCAPE: Key.QUIT,
}


def translate_event(event) -> KeyEvent | None:
    if event.type == pygame.QUIT:
        return KeyEvent(Key.QUIT)
    if event.type == pygame.KEYDOWN:
        return KeyEvent(_KEYS.get(event.key, Key.OTHER))
    return None


class PygameScreen(KeyBuffer):
    """A window laid out as a grid of character cells.

    SDL wants its events pumped on the thread that owns the window, so
    ``flush`` pumps them and ``poll_event`` reads them from the key buffer.
    """

    def __init__(self, columns: int = config.GRID_COLUMNS, rows: int = config.GRID_ROWS):
        super().__init__()
        try:
            pygame.init()
            self._surface = pygame.display.set_mode((columns * config.CELL_W, rows * config.CELL_H))
            pygame.display.set_caption("termsnake")
            self._font = pygame.font.SysFont("monospace", config.FONT_SIZE)
        except pygame.error as e:
            pygame.quit()
            raise ScreenInitError(f"failed to init pygame display: {e}") from e
        self._columns, self._rows = columns, rows
        self._glyphs: dict[tuple[str, Color], pygame.Surface] = {}
        self._closed = False

    def _glyph(self, glyph: str, fg: Color) -> pygame.Surface:
        key = (glyph, fg)
        surf = self._glyphs.get(key)
        if surf is None:
            surf = self._font.render(glyph, True, _RGB.get(fg, DEFAULT_FG))
            self._glyphs[key] = surf
        return surf

    def size(self) -> tuple[int, int]:
        return self._columns, self._rows

    def clear(self, fg: Color, bg: Color) -> None:
        self._surface.fill(_RGB.get(bg, DEFAULT_BG))

    def set_cell(self, x: int, y: int, glyph: str, fg: Color, bg: Color) -> None:
        if not (0 <= x < self._columns and 0 <= y < self._rows):
            return
        rect = pygame.Rect(x * config.CELL_W, y * config.CELL_H, config.CELL_W, config.CELL_H)
        pygame.draw.rect(self._surface, _RGB.get(bg, DEFAULT_BG), rect)
        self._surface.blit(self._glyph(glyph, fg), rect)

    def flush(self) -> None:
        pygame.display.flip()
        for event in pygame.event.get():
            key_event = translate_event(event)
            if key_event is not None:
                self.push(key_event)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        pygame.quit()
