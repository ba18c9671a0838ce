from __future__ import annotations

from .screen import Color

# Seconds between automatic moves.
TICK_INTERVAL = 0.070

# Seconds the game-over screen stays up before the process exits.
# This is the value the game has always shipped with (70 s, not 70 ms).
CRASH_EXIT_DELAY = 70.0

SNAKE_GLYPH = "&"
SNAKE_FG = Color.RED
SNAKE_BG = Color.DEFAULT

APPLE_GLYPH = "O"
APPLE_FG = Color.LIGHT_GREEN
APPLE_BG = Color.DEFAULT

ENERGY_GLYPH = "E"
ENERGY_FG = Color.BLUE
ENERGY_BG = Color.DEFAULT

GAME_OVER_TEXT = "GAME OVER"

# pygame window: a grid of character cells.
CELL_W, CELL_H = 12, 20
GRID_COLUMNS, GRID_ROWS = 60, 30
FONT_SIZE = 18
