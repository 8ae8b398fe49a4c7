"""pygame front end: window, keyboard, rotated maze drawing, HUD and victory screen."""

import logging
import math

import pygame

from tilt_maze.config import (BLACK, BLUE, CYAN, DARK_GRAY, FLOOR, GRAY, GREEN, RED, WHITE, YELLOW,
                              GameConfig)
from tilt_maze.rotation import Direction
from tilt_maze.session import FrameScheduler, GameSession
from tilt_maze.sounds import SoundGenerator, play_sound_sequence

logger = logging.getLogger(__name__)

HUD_HEIGHT = 60
WALL_SOUND_IMPACT = 3.0  # px/frame of speed lost before a thud is played

ROTATE_KEYS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class Game:
    """Main game class"""

    def __init__(self, config=None, fullscreen=False):
        pygame.init()
        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=512)

        self.session = GameSession(config or GameConfig())
        self.config = self.session.config
        # False once the session reports the maze solved
        self.playing = True
        self.session.add_victory_listener(self._on_victory)

        view = self.config.view_size
        if fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode((view, view + HUD_HEIGHT))
        self.screen_width, self.screen_height = self.screen.get_size()
        pygame.display.set_caption("Tilt Maze")

        # Centre of the square area the maze turns in, below the HUD
        self.view_center = (self.screen_width // 2, HUD_HEIGHT + (self.screen_height - HUD_HEIGHT) // 2)

        self.clock = pygame.time.Clock()
        self.running = True
        self.maze_surface = pygame.Surface((self.config.maze_pixel_width, self.config.maze_pixel_height))

        self._init_sounds()

        # Fonts
        self.title_font = pygame.font.Font(None, 72)
        self.medium_font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 24)

    def _init_sounds(self):
        """Initialize all game sounds"""
        self.sounds = {
            'rotate': SoundGenerator.generate_rotate_sound(),
            'wall': SoundGenerator.generate_wall_sound(),
            'victory': SoundGenerator.generate_victory_sound(),
        }

    def _on_victory(self, event):
        play_sound_sequence(self.sounds['victory'])

    def restart(self):
        self.session.restart()
        self.playing = True
        logger.debug("Restarted from the keyboard")

    def handle_events(self):
        """Handle pygame events"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_q, pygame.K_ESCAPE):
                    self.running = False
                elif event.key == pygame.K_r:
                    self.restart()
                elif event.key == pygame.K_SPACE and self.session.game_over:
                    self.restart()
                elif event.key in ROTATE_KEYS:
                    if self.session.rotate(ROTATE_KEYS[event.key]):
                        play_sound_sequence(self.sounds['rotate'], 40)

    def update(self, timestamp):
        """Advance the session one frame unless the maze is already solved"""
        if not self.playing:
            return
        self.playing = self.session.tick(timestamp)
        if self.session.last_impact > WALL_SOUND_IMPACT:
            self.sounds['wall'].play()

    def draw(self):
        """Draw the game"""
        self.screen.fill(BLACK)
        self._draw_maze()
        self._draw_hud()
        if self.session.game_over:
            self._draw_victory()
        pygame.display.flip()

    def _draw_maze(self):
        """Draw the maze unrotated, then turn it about its centre onto the screen"""
        surface = self.maze_surface
        cell = self.config.cell_size
        surface.fill(FLOOR)

        for wall in self.session.walls:
            pygame.draw.rect(surface, DARK_GRAY, pygame.Rect(wall.x, wall.y, wall.width, wall.height))

        entrance = self.session.entrance_rect
        pygame.draw.rect(surface, GREEN, pygame.Rect(entrance.x, entrance.y, cell, cell))
        goal = self.session.goal_rect
        pygame.draw.rect(surface, RED, pygame.Rect(goal.x, goal.y, cell, cell))

        sprite = self.session.sprite
        pygame.draw.ellipse(surface, BLUE, pygame.Rect(round(sprite.x), round(sprite.y),
                                                       sprite.width, sprite.height))

        # pygame turns counter-clockwise for positive angles
        angle = -math.degrees(self.session.rotation.current_rotation)
        rotated = pygame.transform.rotate(surface, angle)
        self.screen.blit(rotated, rotated.get_rect(center=self.view_center))

    def _draw_hud(self):
        """Draw the heads-up display"""
        hud = self.session.hud_snapshot()

        time_text = self.medium_font.render(f"Time: {hud.elapsed_seconds:.2f}", True, WHITE)
        self.screen.blit(time_text, (20, 18))

        rotation_text = self.medium_font.render(f"Rotations: {hud.rotation_count}", True, WHITE)
        rotation_rect = rotation_text.get_rect(topright=(self.screen_width - 20, 18))
        self.screen.blit(rotation_text, rotation_rect)

    def _draw_victory(self):
        """Draw the victory overlay"""
        overlay = pygame.Surface((self.screen_width, self.screen_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        self.screen.blit(overlay, (0, 0))

        hud = self.session.hud_snapshot()
        lines = [
            (self.title_font, "Victory!", YELLOW),
            (self.medium_font, f"Time: {hud.elapsed_seconds:.2f} seconds", WHITE),
            (self.medium_font, f"Rotations: {hud.rotation_count}", CYAN),
            (self.small_font, "Press SPACE to play again", GRAY),
        ]

        y = self.screen_height // 3
        for font, text, color in lines:
            rendered = font.render(text, True, color)
            rect = rendered.get_rect(center=(self.screen_width // 2, y))
            self.screen.blit(rendered, rect)
            y += rendered.get_height() + 20

    def frame(self, timestamp):
        """One pass of the main loop; returns False once the player quits"""
        self.handle_events()
        self.update(timestamp)
        self.draw()
        self.clock.tick(self.config.fps)
        return self.running

    def run(self):
        """Main game loop"""
        scheduler = FrameScheduler(self.frame, pygame.time.get_ticks)
        try:
            scheduler.run()
        finally:
            pygame.quit()
