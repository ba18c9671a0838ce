from termsnake.coords import CARDINALS, DOWN, LEFT, RIGHT, UP, Coord, add_vectors, wrap


def test_wrap_range_and_congruence():
    for m in range(1, 8):
        for n in range(-30, 31):
            r = wrap(n, m)
            assert 0 <= r < m
            assert (r - n) % m == 0


def test_wrap_negative_steps_to_far_edge():
    assert wrap(-1, 10) == 9
    assert wrap(-11, 10) == 9
    assert wrap(10, 10) == 0


def test_add_vectors():
    assert add_vectors(Coord(3, 4), LEFT) == Coord(2, 4)
    assert add_vectors((0, 0), DOWN) == (0, 1)


def test_cardinals_are_unit_vectors():
    assert set(CARDINALS) == {UP, DOWN, LEFT, RIGHT}
    for dx, dy in CARDINALS:
        assert abs(dx) + abs(dy) == 1
