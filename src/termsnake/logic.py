from __future__ import annotations

import logging
import random

from .coords import DOWN, LEFT, RIGHT, UP, Coord, add_vectors, wrap
from .events import Key
from .state import Consumable, Functor, State, random_coord

logger = logging.getLogger(__name__)

KEY_HEADINGS = {
    Key.UP: UP,
    Key.DOWN: DOWN,
    Key.LEFT: LEFT,
    Key.RIGHT: RIGHT,
}


def advance(pos: Coord, heading: Coord, width: int, height: int) -> Coord:
    x, y = add_vectors(pos, heading)
    return Coord(wrap(x, width), wrap(y, height))


def move_actor(state: State) -> State:
    new_pos = advance(state.actor.pos, state.heading, state.width, state.height)
    return state._replace(actor=state.actor._replace(pos=new_pos))


def set_heading(state: State, key: Key) -> State:
    # No reversal guard: turning straight back is allowed.
    new_heading = KEY_HEADINGS.get(key)
    if new_heading is None:
        return state
    return state._replace(heading=new_heading)


def check_consumption(
    consumable: Consumable,
    actor_pos: Coord,
    width: int,
    height: int,
    rng: random.Random,
) -> Consumable:
    if consumable.pos != actor_pos:
        return consumable
    new_pos = random_coord(width, height, rng)
    logger.debug("%s eaten at %s, respawned at %s", consumable.kind, tuple(actor_pos), tuple(new_pos))
    return consumable._replace(pos=new_pos)


def eat_consumables(state: State, rng: random.Random) -> State:
    def eat(field):
        def apply(s: State) -> State:
            eaten = check_consumption(getattr(s, field), s.actor.pos, s.width, s.height, rng)
            return s._replace(**{field: eaten})

        return apply

    return Functor(state).map(eat("apple")).map(eat("energy")).get()


def is_border_crash(pos: Coord, width: int, height: int) -> bool:
    x, y = pos
    return x == 0 or y == 0 or x == width - 1 or y == height - 1
