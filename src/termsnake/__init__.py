from .coords import Coord, wrap
from .events import Key, KeyEvent, Outcome, Tick
from .state import State, new_game

__all__ = ["Coord", "wrap", "Key", "KeyEvent", "Outcome", "Tick", "State", "new_game"]
