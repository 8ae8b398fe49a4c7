"""Game state for one run of the maze and the frame loop that drives it."""

import logging
import random
from dataclasses import dataclass
from enum import Enum

from tilt_maze.config import GameConfig
from tilt_maze.maze import ENTRANCE, MazeGenerator, Wall, exit_cell
from tilt_maze.physics import Sprite
from tilt_maze.rotation import RotationController

logger = logging.getLogger(__name__)


class RunState(Enum):
    PLAYING = 1
    WON = 2


@dataclass(frozen=True)
class HudSnapshot:
    elapsed_seconds: float
    rotation_count: int


@dataclass(frozen=True)
class VictoryEvent:
    elapsed_seconds: float
    rotation_count: int


class GameSession:
    """Owns the walls, sprite, orientation and run counters of one game.

    A new maze is generated on construction and on every restart(). Frames
    are driven by tick(), which returns False once the game is won so the
    caller stops scheduling further frames.
    """

    def __init__(self, config=None, rng=None):
        self.config = (config or GameConfig()).validate()
        if rng is None:
            rng = random.Random(self.config.seed)
        self.rng = rng
        self.rotation = RotationController(self.config.rotation_speed, self.config.rotation_epsilon)
        self.victory_listeners = []
        self.walls = []
        self.restart()

    def restart(self):
        """Reset run state, orientation and sprite, and build a new maze"""
        cfg = self.config
        self.state = RunState.PLAYING
        self.start_time = None
        self.elapsed_ms = 0
        self.last_impact = 0.0
        self.rotation.reset()

        size = cfg.sprite_size
        self.sprite = Sprite(cfg.cell_size, cfg.cell_size, size, size, gravity=cfg.gravity)

        self.walls.clear()
        self.walls.extend(MazeGenerator.generate(cfg.maze_width, cfg.maze_height, cfg.cell_size, self.rng))
        logger.info("New %dx%d maze ready", cfg.maze_width, cfg.maze_height)

    def add_victory_listener(self, callback):
        self.victory_listeners.append(callback)

    @property
    def game_over(self):
        return self.state is RunState.WON

    @property
    def elapsed_seconds(self):
        return self.elapsed_ms / 1000

    @property
    def bounds(self):
        return (self.config.maze_pixel_width, self.config.maze_pixel_height)

    def _cell_rect(self, cell):
        x, y = cell
        size = self.config.cell_size
        return Wall(x * size, y * size, size, size)

    @property
    def goal_rect(self):
        return self._cell_rect(exit_cell(self.config.maze_width, self.config.maze_height))

    @property
    def entrance_rect(self):
        return self._cell_rect(ENTRANCE)

    def rotate(self, direction):
        """Queue a quarter turn of the maze; ignored once the game is won"""
        if self.game_over:
            return False
        return self.rotation.rotate(direction)

    def update_physics(self):
        """Move the sprite one frame; held still while the maze is turning"""
        self.last_impact = 0.0
        if self.game_over or self.rotation.is_rotating:
            return

        speed_before = self.sprite.speed
        if self.sprite.step(self.walls, self.rotation.current_rotation, self.bounds, self.config.friction):
            # Speed lost against a wall this frame
            self.last_impact = max(0.0, speed_before - self.sprite.speed)

        goal = self.goal_rect
        if self.sprite.overlaps(self.sprite.x, self.sprite.y, goal):
            self._win()

    def advance_rotation(self):
        if self.rotation.advance():
            self.sprite.reproject_velocity(self.rotation.current_rotation)

    def _win(self):
        self.state = RunState.WON
        event = VictoryEvent(self.elapsed_seconds, self.rotation.rotation_count)
        logger.info("Maze solved in %.2fs with %d rotations", event.elapsed_seconds, event.rotation_count)
        for callback in self.victory_listeners:
            callback(event)

    def tick(self, timestamp_ms):
        """Run one frame; returns True while another frame should follow"""
        if self.game_over:
            return False

        if self.start_time is None:
            self.start_time = timestamp_ms
        self.elapsed_ms = timestamp_ms - self.start_time

        self.update_physics()
        self.advance_rotation()
        return not self.game_over

    def hud_snapshot(self):
        return HudSnapshot(self.elapsed_seconds, self.rotation.rotation_count)


class FrameScheduler:
    """Calls frame(clock()) until it returns False or stop() is called"""

    def __init__(self, frame, clock):
        self.frame = frame
        self.clock = clock
        self.running = False

    def stop(self):
        self.running = False

    def run(self, max_frames=None):
        """Run frames and return how many were executed"""
        self.running = True
        frames = 0
        while self.running:
            if max_frames is not None and frames >= max_frames:
                break
            frames += 1
            if not self.frame(self.clock()):
                self.running = False
        return frames
