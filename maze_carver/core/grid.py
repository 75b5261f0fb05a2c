from array import array
from typing import Iterator, List, NamedTuple, Tuple

from maze_carver.core.direction import Direction, VECTORS
from maze_carver.core.errors import InvalidDimension, OutOfRange


class Cell(NamedTuple):
    visited: bool
    left_wall: bool
    bottom_wall: bool


class Grid:
    # Bitmask Constants
    # Each cell only owns its LEFT and BOTTOM walls. The right wall of a cell
    # is the left wall of its right neighbour, the top wall is the bottom wall
    # of the neighbour above.
    WALL_LEFT   = 0b00000001
    WALL_BOTTOM = 0b00000010

    # Flags
    VISITED = 0b00000100

    ALL_WALLS = WALL_LEFT | WALL_BOTTOM

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise InvalidDimension(width, height)
        self.width = width
        self.height = height
        # 1 byte per cell, all owned walls present, nothing visited
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise OutOfRange(x, y, self.width, self.height)

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[self.get_index(x, y)] & self.VISITED) != 0

    def mark_visited(self, x: int, y: int):
        self.cells[self.get_index(x, y)] |= self.VISITED

    def _owner(self, x: int, y: int, direction: Direction) -> Tuple[int, int]:
        """
        Resolves which cell owns the wall on 'direction' side of (x, y)
        and which of its bits it is.
        Sides facing out of the grid belong to the perimeter and have no owner.
        """
        dx, dy = VECTORS[direction]
        nx, ny = x + dx, y + dy
        if not (0 <= nx < self.width and 0 <= ny < self.height):
            raise OutOfRange(nx, ny, self.width, self.height)

        if direction == Direction.LEFT:
            return self.get_index(x, y), self.WALL_LEFT
        if direction == Direction.DOWN:
            return self.get_index(x, y), self.WALL_BOTTOM
        if direction == Direction.RIGHT:
            return self.get_index(nx, ny), self.WALL_LEFT
        return self.get_index(nx, ny), self.WALL_BOTTOM

    def break_wall(self, x: int, y: int, direction: Direction):
        """
        Removes the wall between (x, y) and its neighbour in 'direction'.
        Breaking an already broken wall is a no-op.
        """
        self.get_index(x, y)
        idx, bit = self._owner(x, y, direction)
        self.cells[idx] &= ~bit

    def has_wall(self, x: int, y: int, direction: Direction) -> bool:
        self.get_index(x, y)
        dx, dy = VECTORS[direction]
        if not self.is_in_bounds(x + dx, y + dy):
            return True  # perimeter
        idx, bit = self._owner(x, y, direction)
        return (self.cells[idx] & bit) != 0

    def cell(self, x: int, y: int) -> Cell:
        val = self.cells[self.get_index(x, y)]
        return Cell(
            visited=bool(val & self.VISITED),
            left_wall=bool(val & self.WALL_LEFT),
            bottom_wall=bool(val & self.WALL_BOTTOM),
        )

    @property
    def outer_walls(self) -> List[Tuple[int, int]]:
        """Static top and right perimeter as a polyline, from top-left to bottom-right."""
        return [(0, self.height), (self.width, self.height), (self.width, 0)]

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, Direction]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        for direction, (dx, dy) in VECTORS.items():
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.width and 0 <= ny < self.height:
                yield (nx, ny, direction)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        for nx, ny, direction in self.get_neighbors(x, y):
            if not self.has_wall(x, y, direction):
                yield (nx, ny)
