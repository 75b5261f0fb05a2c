import logging
from typing import Optional

from maze_carver.core.config import GenerationConfig
from maze_carver.core.grid import Grid
from maze_carver.core.scheduler import StepScheduler

logger = logging.getLogger(__name__)


class MazeSession:
    """
    Owns the grid of the current run and the scheduler that carves it.
    regenerate() is the single entry point for (re)starting generation.
    """

    def __init__(self, config: GenerationConfig = None, scheduler: StepScheduler = None):
        self.config = config or GenerationConfig()
        self.scheduler = scheduler or StepScheduler()
        self.grid: Optional[Grid] = None

    def regenerate(self, config: GenerationConfig = None) -> Grid:
        self.scheduler.cancel()

        if config is not None:
            self.config = config
        cfg = self.config
        cfg.validate()

        self.grid = Grid(cfg.width, cfg.height)
        self.scheduler.start(self.grid, cfg.clamped_start(), cfg.step_delay, seed=cfg.seed)
        return self.grid

    def tick(self, now: float = None) -> int:
        return self.scheduler.tick(now)

    @property
    def is_running(self) -> bool:
        return self.scheduler.is_running
