from typing import Tuple

Point = Tuple[float, float]


class MarkerTween:
    """Linear move of a marker from 'origin' to 'target' over 'duration' seconds."""

    __slots__ = ('origin', 'target', 'started', 'duration')

    def __init__(self, origin: Point, target: Point, started: float = 0.0, duration: float = 0.0):
        self.origin = origin
        self.target = target
        self.started = started
        self.duration = duration

    @classmethod
    def at(cls, point: Point) -> "MarkerTween":
        return cls(point, point)

    def progress(self, now: float) -> float:
        if self.duration <= 0:
            return 1.0
        return min(max((now - self.started) / self.duration, 0.0), 1.0)

    def position(self, now: float) -> Point:
        t = self.progress(now)
        ox, oy = self.origin
        tx, ty = self.target
        return ox + (tx - ox) * t, oy + (ty - oy) * t

    def is_playing(self, now: float) -> bool:
        return self.progress(now) < 1.0
