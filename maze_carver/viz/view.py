import time
from typing import Callable, Iterator, Set, Tuple

from maze_carver.core.direction import Direction
from maze_carver.core.events import Backtracked, Event, RunFinished, RunStarted, StepEvent
from maze_carver.viz.tween import MarkerTween

Segment = Tuple[Tuple[float, float], Tuple[float, float]]


def _center(coord) -> Tuple[float, float]:
    return coord[0] + 0.5, coord[1] + 0.5


def owned_wall(coord, direction: Direction) -> Tuple[int, int, Direction]:
    """Maps a wall side to (owner_x, owner_y, LEFT|DOWN)."""
    x, y = coord
    if direction == Direction.RIGHT:
        return x + 1, y, Direction.LEFT
    if direction == Direction.UP:
        return x, y + 1, Direction.DOWN
    return x, y, direction


class MazeView:
    """
    Renderer-side picture of the maze, rebuilt only from scheduler events.
    It never holds a reference to the Grid being carved.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.width = 0
        self.height = 0
        self.step_delay = 0.0
        self.broken: Set[Tuple[int, int, Direction]] = set()
        self.visited: Set[Tuple[int, int]] = set()
        self.current_marker = MarkerTween.at((0.5, 0.5))
        self.previous_marker = MarkerTween.at((0.5, 0.5))
        self.steps = 0
        self.finished = False

    def __call__(self, event: Event):
        self.apply(event)

    def apply(self, event: Event):
        if isinstance(event, StepEvent):
            coord, direction = event.broken_wall
            self.broken.add(owned_wall(coord, direction))
            self.visited.add(event.moved_to)
            self.steps += 1
            now = self.clock()
            self.current_marker = MarkerTween(
                self.current_marker.position(now), _center(event.moved_to), now, self.step_delay)
            self.previous_marker = MarkerTween(
                self.previous_marker.position(now), _center(event.moved_from), now, self.step_delay)

        elif isinstance(event, Backtracked):
            # Snap without animation
            self.current_marker = MarkerTween.at(_center(event.current))
            self.previous_marker = MarkerTween.at(_center(event.previous))

        elif isinstance(event, RunStarted):
            self.width = event.width
            self.height = event.height
            self.step_delay = event.step_delay
            self.broken = set()
            self.visited = {event.start}
            self.steps = 0
            self.finished = False
            self.current_marker = MarkerTween.at(_center(event.start))
            self.previous_marker = MarkerTween.at(_center(event.start))

        elif isinstance(event, RunFinished):
            self.finished = True

    def has_wall(self, x: int, y: int, direction: Direction) -> bool:
        return owned_wall((x, y), direction) not in self.broken

    def wall_segments(self) -> Iterator[Segment]:
        """Intact cell-owned walls in grid units, y up. The outer top/right edge is separate."""
        for y in range(self.height):
            for x in range(self.width):
                if (x, y, Direction.LEFT) not in self.broken:
                    yield (x, y), (x, y + 1)
                if (x, y, Direction.DOWN) not in self.broken:
                    yield (x, y), (x + 1, y)

    def outer_walls(self):
        return [(0, self.height), (self.width, self.height), (self.width, 0)]

    def markers(self, now: float = None):
        if now is None:
            now = self.clock()
        return self.current_marker.position(now), self.previous_marker.position(now)
