from typing import NamedTuple, Tuple, Union

from maze_carver.core.direction import Direction

Coord = Tuple[int, int]


class RunStarted(NamedTuple):
    width: int
    height: int
    start: Coord
    step_delay: float


class StepEvent(NamedTuple):
    """One wall-break: the wall on 'broken_wall[1]' side of 'broken_wall[0]' is gone."""
    broken_wall: Tuple[Coord, Direction]
    moved_to: Coord
    moved_from: Coord


class Backtracked(NamedTuple):
    """The carver returned to 'current', which it originally entered from 'previous'."""
    current: Coord
    previous: Coord


class RunFinished(NamedTuple):
    steps: int


Event = Union[RunStarted, StepEvent, Backtracked, RunFinished]
