from __future__ import annotations

import random
from typing import NamedTuple

from .coords import RIGHT, Coord


class Actor(NamedTuple):
    pos: Coord


class Consumable(NamedTuple):
    kind: str  # "apple" | "energy"
    pos: Coord


class State(NamedTuple):
    actor: Actor
    heading: Coord  # always one of coords.CARDINALS
    apple: Consumable
    energy: Consumable
    width: int
    height: int


def random_coord(width: int, height: int, rng: random.Random) -> Coord:
    x = rng.randrange(width)
    y = rng.randrange(height)
    return Coord(x, y)


def new_game(width: int, height: int, rng: random.Random) -> State:
    """Fresh game: everything placed uniformly at random, heading right."""
    return State(
        actor=Actor(random_coord(width, height, rng)),
        heading=RIGHT,
        apple=Consumable("apple", random_coord(width, height, rng)),
        energy=Consumable("energy", random_coord(width, height, rng)),
        width=width,
        height=height,
    )


class Functor:
    """Tiny helper for chaining state transforms."""

    def __init__(self, value):
        self.value = value

    def map(self, func):
        return Functor(func(self.value))

    def get(self):
        return self.value
