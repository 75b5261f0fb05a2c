class MazeError(Exception):
    """Base class for maze carver errors."""


class InvalidDimension(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Maze dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class OutOfRange(MazeError, IndexError):
    """Raised when a coordinate falls outside the grid.

    Inside the carver this means its own bounds check is broken, so callers
    should not try to recover from it.
    """

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Coordinate ({x}, {y}) out of bounds for {width}x{height} grid")
        self.x = x
        self.y = y
