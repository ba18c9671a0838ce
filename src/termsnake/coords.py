from __future__ import annotations

from typing import NamedTuple


class Coord(NamedTuple):
    x: int
    y: int


UP = Coord(0, -1)
DOWN = Coord(0, 1)
LEFT = Coord(-1, 0)
RIGHT = Coord(1, 0)

CARDINALS = (UP, DOWN, LEFT, RIGHT)


def wrap(n: int, m: int) -> int:
    """Modulo that always lands in [0, m), also for negative n."""
    return ((n % m) + m) % m


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> Coord:
    return Coord(a[0] + b[0], a[1] + b[1])
