from __future__ import annotations

from . import config
from .screen import Color, Screen
from .state import State


def write_text(screen: Screen, x: int, y: int, text: str, fg: Color, bg: Color) -> None:
    for i, ch in enumerate(text):
        screen.set_cell(x + i, y, ch, fg, bg)


def _draw_position(screen: Screen, state: State, pos, fg: Color, bg: Color) -> None:
    # Debug overlay, right-aligned on the top row.
    text = f"({pos.x}, {pos.y})"
    write_text(screen, state.width - len(text), 0, text, fg, bg)


def draw_state(screen: Screen, state: State) -> None:
    screen.clear(config.SNAKE_FG, config.SNAKE_BG)

    _draw_position(screen, state, state.actor.pos, config.SNAKE_FG, config.SNAKE_BG)
    _draw_position(screen, state, state.apple.pos, config.APPLE_FG, config.APPLE_BG)
    _draw_position(screen, state, state.energy.pos, config.ENERGY_FG, config.ENERGY_BG)

    ax, ay = state.actor.pos
    screen.set_cell(ax, ay, config.SNAKE_GLYPH, config.SNAKE_FG, config.SNAKE_BG)
    px, py = state.apple.pos
    screen.set_cell(px, py, config.APPLE_GLYPH, config.APPLE_FG, config.APPLE_BG)
    ex, ey = state.energy.pos
    screen.set_cell(ex, ey, config.ENERGY_GLYPH, config.ENERGY_FG, config.ENERGY_BG)

    screen.flush()


def draw_game_over(screen: Screen, state: State) -> None:
    text = config.GAME_OVER_TEXT
    x = max(0, (state.width - len(text)) // 2)
    write_text(screen, x, state.height // 2, text, Color.WHITE, Color.DEFAULT)
    screen.flush()
