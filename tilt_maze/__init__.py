"""Tilt Maze - roll a ball out of a maze by turning the maze itself."""

from tilt_maze.config import GameConfig
from tilt_maze.errors import ConfigurationError, TiltMazeError
from tilt_maze.maze import Cell, MazeGenerator, Wall
from tilt_maze.physics import Sprite
from tilt_maze.rotation import Direction, RotationController, RotationState
from tilt_maze.session import FrameScheduler, GameSession, HudSnapshot, RunState, VictoryEvent

__version__ = "1.0.0"
