"""Game constants and the tunable configuration bundle."""

import math
from dataclasses import dataclass
from typing import Optional

from tilt_maze.errors import ConfigurationError

# Game constants
MAZE_WIDTH = 15
MAZE_HEIGHT = 15
CELL_SIZE = 20
FPS = 60
GRAVITY = 0.5
FRICTION = 0.98
ROTATION_SPEED = 0.1
ROTATION_EPSILON = 0.01
SPRITE_INSET = 4  # sprite is slightly smaller than a cell
MIN_MAZE_SIZE = 5

# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (100, 100, 100)
DARK_GRAY = (50, 50, 50)
GREEN = (0, 200, 0)
RED = (220, 0, 0)
BLUE = (30, 90, 255)
YELLOW = (255, 255, 0)
CYAN = (0, 255, 255)
FLOOR = (230, 230, 235)


def validate_maze_dimensions(width, height):
    """Reject dimensions the carving cannot fill completely"""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"maze {name} must be an integer, got {value!r}")
        if value < MIN_MAZE_SIZE:
            raise ConfigurationError(f"maze {name} must be at least {MIN_MAZE_SIZE}, got {value}")
        if value % 2 == 0:
            raise ConfigurationError(f"maze {name} must be odd, got {value}")


@dataclass(frozen=True)
class GameConfig:
    """Tunables for one game of tilt maze."""
    maze_width: int = MAZE_WIDTH
    maze_height: int = MAZE_HEIGHT
    cell_size: int = CELL_SIZE
    gravity: float = GRAVITY
    friction: float = FRICTION
    rotation_speed: float = ROTATION_SPEED
    rotation_epsilon: float = ROTATION_EPSILON
    sprite_inset: int = SPRITE_INSET
    fps: int = FPS
    seed: Optional[int] = None

    def validate(self):
        """Raise ConfigurationError if any field is out of range, else return self"""
        validate_maze_dimensions(self.maze_width, self.maze_height)
        if self.cell_size <= 0:
            raise ConfigurationError(f"cell_size must be positive, got {self.cell_size}")
        if not 0 <= self.sprite_inset < self.cell_size:
            raise ConfigurationError(
                f"sprite_inset must be in [0, {self.cell_size}), got {self.sprite_inset}")
        if self.gravity < 0:
            raise ConfigurationError(f"gravity must not be negative, got {self.gravity}")
        if not 0 < self.friction <= 1:
            raise ConfigurationError(f"friction must be in (0, 1], got {self.friction}")
        if not 0 < self.rotation_speed <= 1:
            raise ConfigurationError(f"rotation_speed must be in (0, 1], got {self.rotation_speed}")
        if self.rotation_epsilon <= 0:
            raise ConfigurationError(f"rotation_epsilon must be positive, got {self.rotation_epsilon}")
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be positive, got {self.fps}")
        return self

    @property
    def maze_pixel_width(self):
        return self.maze_width * self.cell_size

    @property
    def maze_pixel_height(self):
        return self.maze_height * self.cell_size

    @property
    def sprite_size(self):
        return self.cell_size - self.sprite_inset

    @property
    def view_size(self):
        """Side of the square view; the maze diagonal so any rotation fits"""
        return math.ceil(math.hypot(self.maze_pixel_width, self.maze_pixel_height))

    @classmethod
    def from_args(cls, args) -> 'GameConfig':
        """Create config from command-line arguments."""
        return cls(
            maze_width=args.width,
            maze_height=args.height,
            cell_size=args.cell_size,
            seed=args.seed,
        ).validate()
