from collections import deque
from typing import Dict, Tuple

from maze_carver.core.direction import Direction
from maze_carver.core.grid import Grid


class MazeStats:
    @staticmethod
    def count_passages(grid: Grid) -> int:
        """Number of broken internal walls."""
        passages = 0
        for y in range(grid.height):
            for x in range(grid.width):
                # Only look at owned walls so each passage is counted once
                if x > 0 and not grid.has_wall(x, y, Direction.LEFT):
                    passages += 1
                if y > 0 and not grid.has_wall(x, y, Direction.DOWN):
                    passages += 1
        return passages

    @staticmethod
    def reachable_from(grid: Grid, start: Tuple[int, int]) -> int:
        seen = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            for nxt in grid.get_open_neighbors(x, y):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return len(seen)

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        A maze is perfect when its passages form a spanning tree:
        every cell reachable and exactly (cells - 1) passages.
        Connected + V-1 edges implies acyclic.
        """
        total = grid.width * grid.height
        if MazeStats.count_passages(grid) != total - 1:
            return False
        return MazeStats.reachable_from(grid, (0, 0)) == total

    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, float]:
        dead_ends = 0
        corridors = 0
        junctions = 0
        visited = 0

        for y in range(grid.height):
            for x in range(grid.width):
                exits = sum(1 for _ in grid.get_open_neighbors(x, y))
                if exits == 1: dead_ends += 1
                elif exits == 2: corridors += 1
                elif exits >= 3: junctions += 1
                if grid.is_visited(x, y):
                    visited += 1

        total = grid.width * grid.height
        return {
            "cells": total,
            "visited": visited,
            "passages": MazeStats.count_passages(grid),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
            "perfect": MazeStats.is_perfect(grid),
        }
