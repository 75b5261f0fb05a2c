import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from maze_carver.core.errors import InvalidDimension

logger = logging.getLogger(__name__)


@dataclass
class GenerationConfig:
    width: int = 20
    height: int = 20
    start: Tuple[int, int] = (0, 0)
    step_delay: float = 0.05
    seed: Optional[int] = None

    def validate(self):
        """Rejects configurations that must never start a run."""
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimension(self.width, self.height)
        if self.step_delay < 0:
            raise ValueError(f"step_delay must be >= 0, got {self.step_delay}")

    def clamped_start(self) -> Tuple[int, int]:
        x, y = self.start
        cx = min(max(x, 0), self.width - 1)
        cy = min(max(y, 0), self.height - 1)
        if (cx, cy) != (x, y):
            logger.warning(f"Start {self.start} outside {self.width}x{self.height}, clamped to {(cx, cy)}")
        return cx, cy
