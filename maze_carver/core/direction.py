import random
from enum import Enum
from typing import List, Optional, Tuple


class Direction(Enum):
    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


# y grows upward: row 0 is the bottom row of the maze
VECTORS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
}


def vector_of(direction: Direction) -> Tuple[int, int]:
    return VECTORS[direction]


def neighbor_of(coord: Tuple[int, int], direction: Direction) -> Tuple[int, int]:
    dx, dy = VECTORS[direction]
    return coord[0] + dx, coord[1] + dy


def random_directions(rng: Optional[random.Random] = None) -> List[Direction]:
    """
    Returns all four directions in a uniformly random order.
    random.shuffle is a Fisher-Yates shuffle, so each of the 24 orderings is
    equally likely.
    """
    directions = list(Direction)
    (rng or random).shuffle(directions)
    return directions
