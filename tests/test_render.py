from conftest import FakeScreen, make_state

from termsnake import config
from termsnake.render import draw_game_over, draw_state, write_text
from termsnake.screen import Color


def test_draw_state_draws_all_three_cells():
    screen = FakeScreen(width=20, height=10)
    s = make_state(actor=(3, 5), apple=(7, 7), energy=(12, 4), width=20, height=10)
    draw_state(screen, s)

    assert screen.clears == [(config.SNAKE_FG, config.SNAKE_BG)]
    assert len(screen.frames) == 1
    frame = screen.frames[0]
    assert frame[(3, 5)] == (config.SNAKE_GLYPH, config.SNAKE_FG, config.SNAKE_BG)
    assert frame[(7, 7)] == (config.APPLE_GLYPH, config.APPLE_FG, config.APPLE_BG)
    assert frame[(12, 4)] == (config.ENERGY_GLYPH, config.ENERGY_FG, config.ENERGY_BG)


def test_position_overlay_ends_at_right_edge():
    screen = FakeScreen(width=20, height=10)
    s = make_state(actor=(3, 5), apple=(7, 7), energy=(12, 4), width=20, height=10)
    draw_state(screen, s)

    # Energy overlay is drawn last, so it is the one left on top.
    text = "(12, 4)"
    row = "".join(screen.frames[0][(x, 0)][0] for x in range(20 - len(text), 20))
    assert row == text
    assert screen.frames[0][(19, 0)][1] == config.ENERGY_FG


def test_write_text_one_cell_per_char():
    screen = FakeScreen()
    write_text(screen, 2, 1, "hey", Color.WHITE, Color.DEFAULT)
    assert screen.cells == {
        (2, 1): ("h", Color.WHITE, Color.DEFAULT),
        (3, 1): ("e", Color.WHITE, Color.DEFAULT),
        (4, 1): ("y", Color.WHITE, Color.DEFAULT),
    }


def test_game_over_is_centred():
    screen = FakeScreen(width=21, height=9)
    draw_game_over(screen, make_state(width=21, height=9))
    text = config.GAME_OVER_TEXT
    x0 = (21 - len(text)) // 2
    assert "".join(screen.cells[(x0 + i, 4)][0] for i in range(len(text))) == text
    assert len(screen.frames) == 1
