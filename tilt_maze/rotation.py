"""Quarter-turn rotation of the maze with eased animation."""

import logging
import math
from enum import Enum

from tilt_maze.config import ROTATION_EPSILON, ROTATION_SPEED

logger = logging.getLogger(__name__)

QUARTER_TURN = math.pi / 2


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def sign(self):
        return 1 if self is Direction.RIGHT else -1


class RotationState(Enum):
    IDLE = 1
    ROTATING = 2


class RotationController:
    """Turns the maze a quarter at a time, easing toward the target angle"""

    def __init__(self, speed=ROTATION_SPEED, epsilon=ROTATION_EPSILON):
        self.speed = speed
        self.epsilon = epsilon
        self.reset()

    def reset(self):
        self.current_rotation = 0.0
        self.quarter_turns = 0
        self.rotation_count = 0
        self.state = RotationState.IDLE

    @property
    def target_rotation(self):
        # Derived from whole turns so repeated rotations don't drift
        return self.quarter_turns * QUARTER_TURN

    @property
    def is_rotating(self):
        return self.state is RotationState.ROTATING

    @property
    def orientation(self):
        """Resting orientation as a number of right quarter turns, 0..3"""
        return self.quarter_turns % 4

    def rotate(self, direction):
        """Start a quarter turn; ignored (returns False) while already turning"""
        direction = Direction(direction)
        if self.state is RotationState.ROTATING:
            return False

        self.quarter_turns += direction.sign
        self.rotation_count += 1
        self.state = RotationState.ROTATING
        logger.debug("Rotating %s toward %.3f rad", direction.value, self.target_rotation)
        return True

    def advance(self):
        """Step the animation; returns True on the frame the turn completes"""
        if self.state is RotationState.IDLE:
            return False

        diff = self.target_rotation - self.current_rotation
        if abs(diff) > self.epsilon:
            self.current_rotation += diff * self.speed
            return False

        self.current_rotation = self.target_rotation
        self.state = RotationState.IDLE
        logger.debug("Rotation complete at orientation %d", self.orientation)
        return True
