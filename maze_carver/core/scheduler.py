import logging
import time
from typing import Callable, Iterator, List, Optional, Tuple

from maze_carver.algo.dfs import RecursiveBacktracker
from maze_carver.core.errors import OutOfRange
from maze_carver.core.events import Event, RunFinished, RunStarted, StepEvent
from maze_carver.core.grid import Grid

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


class GenerationRun:
    __slots__ = ('token', 'events', 'step_delay', 'next_due', 'steps')

    def __init__(self, token: int, events: Iterator, step_delay: float, next_due: float):
        self.token = token
        self.events = events
        self.step_delay = step_delay
        self.next_due = next_due
        self.steps = 0


class StepScheduler:
    """
    Paces a carver so that one wall-break becomes visible per 'step_delay'.

    The scheduler never blocks on its own. Callers drive it with tick(), from a
    frame loop or from run_blocking(). Every start() and cancel() bumps a
    generation token. A tick loop that finds its token stale (because a
    listener cancelled or restarted mid-tick) drops out without touching the
    grid again.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, max_steps_per_tick: Optional[int] = None):
        self.clock = clock
        self.max_steps_per_tick = max_steps_per_tick
        self.listeners: List[Listener] = []
        self._generation = 0
        self._run: Optional[GenerationRun] = None
        self._latest: Optional[GenerationRun] = None

    def add_listener(self, listener: Listener):
        self.listeners.append(listener)

    def remove_listener(self, listener: Listener):
        self.listeners.remove(listener)

    @property
    def is_running(self) -> bool:
        return self._run is not None

    @property
    def steps_taken(self) -> int:
        """Steps applied by the active run, or by the most recent one once it ends."""
        return self._latest.steps if self._latest else 0

    def start(self, grid: Grid, start: Tuple[int, int], step_delay: float, seed: int = None):
        self.cancel()

        if step_delay < 0:
            raise ValueError(f"step_delay must be >= 0, got {step_delay}")
        sx, sy = start
        if not grid.is_in_bounds(sx, sy):
            raise OutOfRange(sx, sy, grid.width, grid.height)

        self._generation += 1
        grid.mark_visited(sx, sy)
        carver = RecursiveBacktracker(grid, (sx, sy), seed=seed)
        self._run = GenerationRun(self._generation, carver.run(), step_delay, self.clock())
        self._latest = self._run

        logger.info(f"Run {self._generation}: {grid.width}x{grid.height} from {start}, delay {step_delay}")
        self._notify(RunStarted(grid.width, grid.height, (sx, sy), step_delay), self._run.token)

    def cancel(self):
        run = self._run
        if run is None:
            return
        self._generation += 1
        self._run = None
        run.events.close()
        logger.debug(f"Run {run.token} cancelled after {run.steps} steps")

    def _is_current(self, run: GenerationRun) -> bool:
        return self._run is run and run.token == self._generation

    def tick(self, now: float = None) -> int:
        """
        Applies the step that is due at 'now', if any.
        A late tick still performs a single step; only a zero delay lets
        steps run back-to-back within one tick.
        Returns the number of wall-breaks performed.
        """
        run = self._run
        if run is None:
            return 0
        if now is None:
            now = self.clock()

        applied = 0
        while now >= run.next_due:
            if not self._is_current(run):
                logger.debug(f"Run {run.token} superseded mid-tick, dropping it")
                break
            if self.max_steps_per_tick is not None and applied >= self.max_steps_per_tick:
                break
            try:
                event = next(run.events)
            except StopIteration:
                self._run = None
                logger.info(f"Run {run.token} finished: {run.steps} steps")
                self._notify(RunFinished(run.steps), run.token)
                break

            if isinstance(event, StepEvent):
                run.steps += 1
                applied += 1
                # One full delay after this step, however late the tick was
                run.next_due = now + run.step_delay
            self._notify(event, run.token)

        return applied

    def run_blocking(self, sleep: Callable[[float], None] = time.sleep):
        """Drives runs to completion, sleeping until each step is due."""
        while self._run is not None:
            self.tick()
            run = self._run
            if run is not None:
                wait = run.next_due - self.clock()
                if wait > 0:
                    sleep(wait)

    def _notify(self, event: Event, token: int):
        for listener in list(self.listeners):
            # A listener may cancel or restart; later listeners must not see the stale event
            if token != self._generation:
                return
            listener(event)
