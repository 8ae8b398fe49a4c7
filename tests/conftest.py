"""Shared fixtures for tilt maze tests."""
import random

import pytest

from tilt_maze.config import GameConfig
from tilt_maze.maze import Cell
from tilt_maze.session import GameSession


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def config():
    """Default-sized maze with a fixed seed."""
    return GameConfig(seed=7)


@pytest.fixture
def zero_gravity_config():
    return GameConfig(seed=7, gravity=0.0)


@pytest.fixture
def session(config):
    return GameSession(config)


def grid_from_walls(walls, width, height, cell_size):
    """Rebuild a cell grid from wall rectangles."""
    grid = [[Cell.PATH for _ in range(width)] for _ in range(height)]
    for wall in walls:
        grid[int(wall.y) // cell_size][int(wall.x) // cell_size] = Cell.WALL
    return grid


def settle_rotation(controller, max_frames=1000):
    """Advance a rotation controller until it is idle; returns frames used."""
    frames = 0
    while controller.is_rotating and frames < max_frames:
        controller.advance()
        frames += 1
    return frames
