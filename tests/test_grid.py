import unittest
import sys
import os

# Add project root to path so we can import maze_carver
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.direction import Direction
from maze_carver.core.errors import InvalidDimension, OutOfRange
from maze_carver.core.grid import Grid

class TestGrid(unittest.TestCase):
    def test_initialization(self):
        w, h = 10, 7
        grid = Grid(w, h)
        self.assertEqual(len(grid.cells), w * h, f"Grid initialization size mismatch. Expected {w*h}, got {len(grid.cells)}")
        for val in grid.cells:
            self.assertEqual(val & Grid.ALL_WALLS, Grid.ALL_WALLS)
            self.assertFalse(val & Grid.VISITED)

    def test_invalid_dimensions(self):
        for w, h in [(0, 5), (5, 0), (-1, 3), (0, 0)]:
            with self.assertRaises(InvalidDimension):
                Grid(w, h)
        # Still a ValueError for callers that don't know our taxonomy
        with self.assertRaises(ValueError):
            Grid(0, 1)

    def test_bounds(self):
        grid = Grid(3, 2)
        self.assertTrue(grid.is_in_bounds(0, 0))
        self.assertTrue(grid.is_in_bounds(2, 1))
        self.assertFalse(grid.is_in_bounds(3, 0))
        self.assertFalse(grid.is_in_bounds(0, 2))
        self.assertFalse(grid.is_in_bounds(-1, 0))
        self.assertFalse(grid.is_in_bounds(0, -1))

    def test_coordinates(self):
        grid = Grid(5, 5)
        self.assertEqual(grid.get_index(2, 2), 12) # 2 * 5 + 2

        with self.assertRaises(OutOfRange):
            grid.get_index(-1, 0)
        with self.assertRaises(IndexError):
            grid.get_index(0, 5)

    def test_visited_flags(self):
        grid = Grid(3, 3)
        self.assertFalse(grid.is_visited(1, 1))
        grid.mark_visited(1, 1)
        grid.mark_visited(1, 1)
        self.assertTrue(grid.is_visited(1, 1))
        self.assertFalse(grid.is_visited(0, 1))

        with self.assertRaises(OutOfRange):
            grid.mark_visited(3, 0)
        with self.assertRaises(OutOfRange):
            grid.is_visited(0, -1)

    def test_break_wall_right_clears_neighbor_left(self):
        grid = Grid(2, 2)
        grid.break_wall(0, 0, Direction.RIGHT)
        self.assertFalse(grid.cell(1, 0).left_wall)
        self.assertTrue(grid.cell(0, 0).left_wall)
        self.assertFalse(grid.has_wall(0, 0, Direction.RIGHT))
        self.assertFalse(grid.has_wall(1, 0, Direction.LEFT))

    def test_break_wall_up_clears_neighbor_bottom(self):
        grid = Grid(2, 2)
        grid.break_wall(0, 0, Direction.UP)
        self.assertFalse(grid.cell(0, 1).bottom_wall)
        self.assertTrue(grid.cell(0, 0).bottom_wall)
        self.assertFalse(grid.has_wall(0, 1, Direction.DOWN))

    def test_break_wall_left_and_down_clear_own_walls(self):
        grid = Grid(2, 2)
        grid.break_wall(1, 1, Direction.LEFT)
        grid.break_wall(1, 1, Direction.DOWN)
        cell = grid.cell(1, 1)
        self.assertFalse(cell.left_wall)
        self.assertFalse(cell.bottom_wall)
        self.assertFalse(grid.has_wall(0, 1, Direction.RIGHT))
        self.assertFalse(grid.has_wall(1, 0, Direction.UP))

    def test_break_wall_is_idempotent(self):
        grid = Grid(2, 1)
        grid.break_wall(0, 0, Direction.RIGHT)
        before = grid.cells.tobytes()
        grid.break_wall(0, 0, Direction.RIGHT)
        grid.break_wall(1, 0, Direction.LEFT)
        self.assertEqual(before, grid.cells.tobytes())

    def test_perimeter_cannot_be_broken(self):
        grid = Grid(2, 2)
        with self.assertRaises(OutOfRange):
            grid.break_wall(0, 0, Direction.LEFT)
        with self.assertRaises(OutOfRange):
            grid.break_wall(0, 0, Direction.DOWN)
        with self.assertRaises(OutOfRange):
            grid.break_wall(1, 1, Direction.UP)
        with self.assertRaises(OutOfRange):
            grid.break_wall(1, 1, Direction.RIGHT)
        for x, y, d in [(0, 0, Direction.LEFT), (1, 1, Direction.UP), (1, 0, Direction.RIGHT)]:
            self.assertTrue(grid.has_wall(x, y, d))

    def test_outer_walls(self):
        grid = Grid(4, 3)
        self.assertEqual(grid.outer_walls, [(0, 3), (4, 3), (4, 0)])

    def test_neighbors(self):
        grid = Grid(3, 3)
        self.assertEqual(len(list(grid.get_neighbors(1, 1))), 4)

        corner_neighbors = list(grid.get_neighbors(0, 0))
        self.assertEqual(len(corner_neighbors), 2)
        self.assertIn((1, 0, Direction.RIGHT), corner_neighbors)
        self.assertIn((0, 1, Direction.UP), corner_neighbors)

    def test_open_neighbors(self):
        grid = Grid(3, 3)
        self.assertEqual(list(grid.get_open_neighbors(1, 1)), [])
        grid.break_wall(1, 1, Direction.UP)
        grid.break_wall(1, 1, Direction.LEFT)
        self.assertEqual(sorted(grid.get_open_neighbors(1, 1)), [(0, 1), (1, 2)])

if __name__ == '__main__':
    unittest.main()
