from abc import ABC, abstractmethod
from typing import Iterator, Tuple, Union

from maze_carver.core.events import Backtracked, StepEvent
from maze_carver.core.grid import Grid

class Carver(ABC):
    def __init__(self, grid: Grid, start: Tuple[int, int], seed: int = None):
        self.grid = grid
        self.start = start
        self.seed = seed
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[Union[StepEvent, Backtracked]]:
        """
        Yields one event per wall-break and per backtrack.
        The actual grid modifications happen in-place on self.grid, before
        the matching event is yielded.
        The start cell must already be marked visited.
        """
        pass

    def run_all(self):
        """Helper to run the carver to completion."""
        for _ in self.run():
            pass
