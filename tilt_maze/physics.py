"""Gravity-driven sprite and its collision response against maze walls."""

import math
from dataclasses import dataclass

from tilt_maze.config import FRICTION, GRAVITY
from tilt_maze.rotation import QUARTER_TURN

# Down direction at each resting orientation, as (x, y)
RESTING_DOWN = [(0.0, 1.0), (1.0, 0.0), (0.0, -1.0), (-1.0, 0.0)]


def down_vector(rotation):
    """Unit "down" for a maze turned by rotation; exact at quarter turns"""
    quarter = round(rotation / QUARTER_TURN)
    if rotation == quarter * QUARTER_TURN:
        return RESTING_DOWN[quarter % 4]
    return (math.sin(rotation), math.cos(rotation))


@dataclass
class Sprite:
    """Ball-like sprite that falls in the direction the maze is tilted"""
    x: float
    y: float
    width: float
    height: float
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    gravity: float = GRAVITY

    @property
    def speed(self):
        return math.hypot(self.velocity_x, self.velocity_y)

    def overlaps(self, x, y, rect):
        """Check if the sprite placed at (x, y) overlaps rect"""
        return (x < rect.x + rect.width and
                x + self.width > rect.x and
                y < rect.y + rect.height and
                y + self.height > rect.y)

    def hits_any(self, x, y, walls):
        return any(self.overlaps(x, y, wall) for wall in walls)

    def apply_gravity(self, rotation):
        """Pull along the maze's rotated "down" direction"""
        down_x, down_y = down_vector(rotation)
        self.velocity_x += self.gravity * down_x
        self.velocity_y += self.gravity * down_y

    def reproject_velocity(self, rotation):
        """Keep the current speed but point it along the new down direction"""
        speed = self.speed
        down_x, down_y = down_vector(rotation)
        self.velocity_x = speed * down_x
        self.velocity_y = speed * down_y

    @staticmethod
    def _clamp(value, upper):
        return max(0, min(value, upper))

    def _collision_axis(self, wall):
        """Axis on which the sprite ran into wall: the one still separated before the move"""
        separated_x = self.x + self.width <= wall.x or self.x >= wall.x + wall.width
        separated_y = self.y + self.height <= wall.y or self.y >= wall.y + wall.height
        if separated_x != separated_y:
            return "x" if separated_x else "y"
        # Corner hit
        return "x" if abs(self.velocity_x) > abs(self.velocity_y) else "y"

    def step(self, walls, rotation, bounds, friction=FRICTION):
        """Advance one frame; returns True if a wall was hit.

        Walls are resolved in the order given. Each overlapped wall stops
        the sprite on the axis it approached from and puts it flush against
        that wall's edge. The resolved position is only taken when it is
        clear of every wall after clamping to bounds; otherwise the sprite
        holds still this frame.
        """
        self.apply_gravity(rotation)

        # Keep the sprite inside the maze
        max_x, max_y = bounds
        new_x = self._clamp(self.x + self.velocity_x, max_x - self.width)
        new_y = self._clamp(self.y + self.velocity_y, max_y - self.height)

        collided = False
        for wall in walls:
            if not self.overlaps(new_x, new_y, wall):
                continue
            collided = True
            if self._collision_axis(wall) == "x":
                self.velocity_x = 0.0
                if self.x + self.width / 2 < wall.x + wall.width / 2:
                    new_x = wall.x - self.width
                else:
                    new_x = wall.x + wall.width
            else:
                self.velocity_y = 0.0
                if self.y + self.height / 2 < wall.y + wall.height / 2:
                    new_y = wall.y - self.height
                else:
                    new_y = wall.y + wall.height

        new_x = self._clamp(new_x, max_x - self.width)
        new_y = self._clamp(new_y, max_y - self.height)
        if not self.hits_any(new_x, new_y, walls):
            self.x = new_x
            self.y = new_y

        self.velocity_x *= friction
        self.velocity_y *= friction

        return collided
