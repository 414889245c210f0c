import random
from typing import Optional

from .config import STATUS_ROW
from .grid import Coord


def spawn_food(width: int, height: int, rng: Optional[random.Random] = None) -> Coord:
    """
    Uniformly random cell with x in [0, width) and y in [1, height).
    The snake body is not excluded. Without an rng the module-level
    generator is used.
    """
    source = rng if rng is not None else random
    fx = source.randrange(width)
    fy = source.randrange(STATUS_ROW + 1, height)
    return (fx, fy)
