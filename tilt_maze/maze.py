"""Perfect maze generation by randomized depth-first search."""

import logging
import random
from collections import deque
from dataclasses import dataclass
from enum import IntEnum

from tilt_maze.config import validate_maze_dimensions

logger = logging.getLogger(__name__)

# Neighbours two cells away, in N/E/S/W order
CARVE_STEPS = [(0, -2), (2, 0), (0, 2), (-2, 0)]
NEIGHBOURS = [(0, -1), (1, 0), (0, 1), (-1, 0)]

START = (1, 1)
ENTRANCE = (0, 1)


class Cell(IntEnum):
    PATH = 0
    WALL = 1


@dataclass(frozen=True)
class Wall:
    """Axis-aligned wall rectangle in pixels"""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height


def exit_cell(width, height):
    """Exit cell on the right-hand edge, level with the last path row"""
    return (width - 1, height - 2)


class MazeGenerator:
    """Generate a perfect maze and turn it into wall rectangles"""

    @staticmethod
    def carve(width, height, rng=None):
        """Carve a maze grid (indexed grid[y][x]) using recursive backtracking"""
        validate_maze_dimensions(width, height)
        if rng is None:
            rng = random.Random()

        # Initialize maze with all walls
        grid = [[Cell.WALL for _ in range(width)] for _ in range(height)]

        def unvisited_neighbours(x, y):
            candidates = []
            for dx, dy in CARVE_STEPS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height and grid[ny][nx] == Cell.WALL:
                    candidates.append((nx, ny))
            return candidates

        # Each stack frame keeps its remaining candidates, so the choice
        # sequence matches the recursive formulation for a given seed
        sx, sy = START
        grid[sy][sx] = Cell.PATH
        stack = [(sx, sy, unvisited_neighbours(sx, sy))]

        while stack:
            x, y, candidates = stack[-1]
            if not candidates:
                stack.pop()
                continue

            nx, ny = candidates.pop(rng.randrange(len(candidates)))
            # An earlier branch may already have reached this cell
            if grid[ny][nx] == Cell.WALL:
                grid[y + (ny - y) // 2][x + (nx - x) // 2] = Cell.PATH
                grid[ny][nx] = Cell.PATH
                stack.append((nx, ny, unvisited_neighbours(nx, ny)))

        ex, ey = ENTRANCE
        grid[ey][ex] = Cell.PATH
        gx, gy = exit_cell(width, height)
        grid[gy][gx] = Cell.PATH

        return grid

    @staticmethod
    def grid_to_walls(grid, cell_size):
        """One wall rectangle per WALL cell, in row-major order"""
        walls = []
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                if cell == Cell.WALL:
                    walls.append(Wall(x * cell_size, y * cell_size, cell_size, cell_size))
        return walls

    @staticmethod
    def generate(width, height, cell_size, rng=None):
        """Generate a fresh maze and return its walls"""
        grid = MazeGenerator.carve(width, height, rng)
        walls = MazeGenerator.grid_to_walls(grid, cell_size)
        logger.debug("Generated %dx%d maze with %d walls", width, height, len(walls))
        return walls

    @staticmethod
    def calculate_distances(grid, start):
        """BFS to calculate distances from start"""
        distances = {start: 0}
        queue = deque([start])
        height = len(grid)
        width = len(grid[0])

        while queue:
            x, y = queue.popleft()
            for dx, dy in NEIGHBOURS:
                nx, ny = x + dx, y + dy
                if (0 <= nx < width and 0 <= ny < height and
                        grid[ny][nx] == Cell.PATH and (nx, ny) not in distances):
                    distances[(nx, ny)] = distances[(x, y)] + 1
                    queue.append((nx, ny))

        return distances

    @staticmethod
    def is_perfect(grid):
        """True if the path cells form a single tree reachable from the entrance"""
        height = len(grid)
        width = len(grid[0])
        paths = [(x, y) for y in range(height) for x in range(width) if grid[y][x] == Cell.PATH]

        distances = MazeGenerator.calculate_distances(grid, ENTRANCE)
        if len(distances) != len(paths):
            return False

        # Count each undirected edge once (east and south neighbours only)
        edges = 0
        for x, y in paths:
            if x + 1 < width and grid[y][x + 1] == Cell.PATH:
                edges += 1
            if y + 1 < height and grid[y + 1][x] == Cell.PATH:
                edges += 1
        return edges == len(paths) - 1
