#!/usr/bin/env python3
"""
flappy_client.py

Pygame window that drives the game engine once per frame and draws its
snapshot. Uses the modular core: config, game_engine, data_models.
"""

import logging

import pygame

from .config import GameConfig, load_config, min_playfield_height
from .constants import RENDER_FPS, WINDOW_TITLE
from .data_models import GamePhase, GameSnapshot
from .game_engine import GameEngine
from .logger import setup_logging

logger = logging.getLogger(__name__)

ACTIVATE_KEYS = (pygame.K_SPACE, pygame.K_UP)

SKY = (112, 197, 206)
PIPE_COLOR = (0, 150, 0)
BIRD_COLOR = (255, 214, 0)
WHITE = (255, 255, 255)
RED = (255, 50, 50)
PINK = (255, 105, 180)


def clamp_resize(config: GameConfig, width: int, height: int):
    """Keeps a user-dragged window large enough to hold one pipe gap."""
    min_height = min_playfield_height(config.gap_size, config.min_pipe_height)
    return max(int(width), 1), max(int(height), min_height)


def dispatch_event(engine: GameEngine, event: pygame.event.Event) -> bool:
    """
    Routes one pygame event to the engine.

    Returns False if the game should quit, True otherwise.
    """
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key in ACTIVATE_KEYS:
            engine.on_activate()
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        # The overlay swallows the click that closes it
        if engine.celebrating:
            engine.on_dismiss_celebration()
        else:
            engine.on_activate()
    elif event.type == pygame.VIDEORESIZE:
        engine.on_resize(*clamp_resize(engine.config, event.w, event.h))
    return True


class FlappyClient:
    def __init__(self, config: GameConfig):
        pygame.init()
        self.config = config
        self.screen = pygame.display.set_mode(
            (config.width, config.height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        self.engine = GameEngine(config)
        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 56)
        self.font = pygame.font.Font(None, 28)

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if not self.handle_event(event):
                    running = False
                    break

            snapshot = self.engine.on_frame(pygame.time.get_ticks())
            self._draw_game(snapshot)

        pygame.quit()

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not dispatch_event(self.engine, event):
            return False
        if event.type == pygame.VIDEORESIZE:
            # Window follows the clamped playfield so the floor stays visible
            size = (int(self.engine.playfield.width), int(self.engine.playfield.height))
            self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        return True

    def _blit_centered(self, text: str, font, color, y: float):
        surf = font.render(text, True, color)
        self.screen.blit(surf, (self.screen.get_width() // 2 - surf.get_width() // 2, y))

    def _draw_game(self, state: GameSnapshot):
        """Renders the snapshot using Pygame."""
        screen = self.screen
        screen.fill(SKY)
        height = state.height
        gap_size = self.config.gap_size
        pipe_width = self.config.pipe_width

        # Pipes
        for x, gap_top in state.obstacles:
            pygame.draw.rect(screen, PIPE_COLOR, (x, 0, pipe_width, gap_top),
                             border_bottom_left_radius=8, border_bottom_right_radius=8)
            bottom_y = gap_top + gap_size
            pygame.draw.rect(screen, PIPE_COLOR, (x, bottom_y, pipe_width, height - bottom_y),
                             border_top_left_radius=8, border_top_right_radius=8)

        # Bird
        size = state.entity_size
        pygame.draw.rect(screen, BIRD_COLOR, (state.entity_x, state.entity_y, size, size),
                         border_radius=int(size // 4))

        # HUD
        self._blit_centered(str(state.score), self.large_font, WHITE, 20)

        if state.phase is GamePhase.IDLE:
            self._blit_centered(WINDOW_TITLE, self.large_font, WHITE, height // 2 - 60)
            self._blit_centered("Click or press Space to flap", self.font, WHITE, height // 2)
        elif state.phase is GamePhase.TERMINAL:
            self._blit_centered("Game Over!", self.large_font, RED, height // 2 - 60)
            self._blit_centered(f"Score: {state.score}", self.font, WHITE, height // 2)
            self._blit_centered("Space / Click = Retry", self.font, WHITE, height // 2 + 30)

        if state.celebrating:
            overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 150))
            screen.blit(overlay, (0, 0))
            self._blit_centered(f"{state.score} pipes!", self.large_font, PINK, height // 2 - 40)
            self._blit_centered("Click to keep playing", self.font, WHITE, height // 2 + 10)

        pygame.display.flip()


def main():
    config = load_config()
    setup_logging(config.log_level)
    logger.info("Starting %s at %dx%d", WINDOW_TITLE, config.width, config.height)
    FlappyClient(config).run()


if __name__ == "__main__":
    main()
