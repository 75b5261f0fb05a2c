import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.algo.dfs import RecursiveBacktracker
from maze_carver.core.complexity import MazeStats
from maze_carver.core.direction import Direction
from maze_carver.core.grid import Grid

class TestComplexity(unittest.TestCase):
    def test_fresh_grid_is_not_perfect(self):
        grid = Grid(3, 3)
        self.assertEqual(MazeStats.count_passages(grid), 0)
        self.assertEqual(MazeStats.reachable_from(grid, (0, 0)), 1)
        self.assertFalse(MazeStats.is_perfect(grid))

    def test_single_cell_is_perfect(self):
        self.assertTrue(MazeStats.is_perfect(Grid(1, 1)))

    def test_cycle_is_not_perfect(self):
        # 2x2 with all four internal walls broken: 4 passages, one loop
        grid = Grid(2, 2)
        grid.break_wall(0, 0, Direction.RIGHT)
        grid.break_wall(0, 0, Direction.UP)
        grid.break_wall(1, 1, Direction.DOWN)
        grid.break_wall(1, 1, Direction.LEFT)
        self.assertEqual(MazeStats.count_passages(grid), 4)
        self.assertEqual(MazeStats.reachable_from(grid, (0, 0)), 4)
        self.assertFalse(MazeStats.is_perfect(grid))

    def test_stats_after_carving(self):
        w, h = 20, 20
        grid = Grid(w, h)
        grid.mark_visited(0, 0)
        RecursiveBacktracker(grid, (0, 0), seed=42).run_all()

        stats = MazeStats.calculate_stats(grid)
        self.assertTrue(stats["perfect"])
        self.assertEqual(stats["visited"], w * h)
        self.assertEqual(stats["passages"], w * h - 1)
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["junctions"], w * h)

if __name__ == '__main__':
    unittest.main()
