import random
from typing import Iterator, List, Tuple, Union

from maze_carver.algo.base import Carver
from maze_carver.core.direction import Direction, neighbor_of, random_directions
from maze_carver.core.events import Backtracked, StepEvent


class _Frame:
    """One unresolved level of the depth-first recursion."""
    __slots__ = ('coord', 'came_from', 'directions', 'index')

    def __init__(self, coord: Tuple[int, int], came_from: Tuple[int, int], directions: List[Direction]):
        self.coord = coord
        self.came_from = came_from
        self.directions = directions
        self.index = 0


class RecursiveBacktracker(Carver):
    def run(self) -> Iterator[Union[StepEvent, Backtracked]]:
        rng = random.Random(self.seed)
        grid = self.grid

        # The root frame "arrived" from itself
        stack: List[_Frame] = [_Frame(self.start, self.start, random_directions(rng))]

        while stack:
            frame = stack[-1]

            if frame.index == len(frame.directions):
                # Dead end, unwind to the caller
                stack.pop()
                if stack:
                    parent = stack[-1]
                    yield Backtracked(parent.coord, parent.came_from)
                continue

            direction = frame.directions[frame.index]
            frame.index += 1

            nx, ny = neighbor_of(frame.coord, direction)
            if not grid.is_in_bounds(nx, ny):
                continue
            # Never walk back through the wall we just came in by
            if (nx, ny) == frame.came_from:
                continue
            if grid.is_visited(nx, ny):
                continue

            cx, cy = frame.coord
            grid.break_wall(cx, cy, direction)
            grid.mark_visited(nx, ny)
            self.step_count += 1

            stack.append(_Frame((nx, ny), frame.coord, random_directions(rng)))
            yield StepEvent((frame.coord, direction), (nx, ny), frame.coord)
