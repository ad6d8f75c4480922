"""pygame window: event loop, key translation, and pixel rendering."""

from __future__ import annotations

import logging

import pygame

from grid_snake.config import GameConfig
from grid_snake.engine import Game
from grid_snake.keys import Key
from grid_snake.render import BACKGROUND_COLOR, Color
from grid_snake.snake import Cell

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake Game"

_PYGAME_KEYS: dict[int, Key] = {
    pygame.K_SPACE: Key.PAUSE,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def key_from_pygame(code: int) -> Key:
    """Translate a pygame key code into a game :class:`Key`."""
    return _PYGAME_KEYS.get(code, Key.OTHER)


class PygameRenderer:
    """Draws grid-aligned shapes on a pygame surface.

    One grid cell is *block_size* pixels square. Colours with an alpha below
    255 are blended through an intermediate surface.
    """

    def __init__(self, surface: pygame.Surface, block_size: int = 25) -> None:
        self.surface = surface
        self.block_size = block_size
        self._fonts: dict[int, pygame.font.Font] = {}

    def to_coord(self, game_coord: int) -> int:
        return game_coord * self.block_size

    def draw_rect(
        self, color: Color, x: int, y: int, width: int, height: int,
    ) -> None:
        rect = pygame.Rect(
            self.to_coord(x), self.to_coord(y),
            self.to_coord(width), self.to_coord(height),
        )
        if color[3] < 255:
            layer = pygame.Surface(rect.size, pygame.SRCALPHA)
            layer.fill(color)
            self.surface.blit(layer, rect.topleft)
        else:
            pygame.draw.rect(self.surface, color, rect)

    def draw_text(
        self, text: str, color: Color, size: int, position: Cell,
    ) -> None:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        image = self._fonts[size].render(text, True, color)
        x, y = position
        self.surface.blit(image, (self.to_coord(x), self.to_coord(y)))


def run(config: GameConfig) -> int:
    """Open a window and play until it is closed or Escape is pressed.

    Each frame delivers pending key presses first, then the elapsed time,
    then draws, so a move triggered by a key is visible to the update.
    """
    game = Game.from_config(config)

    pygame.init()
    screen = pygame.display.set_mode(
        (config.width * config.block_size, config.height * config.block_size),
    )
    pygame.display.set_caption(WINDOW_TITLE)
    renderer = PygameRenderer(screen, block_size=config.block_size)
    clock = pygame.time.Clock()
    logger.info(
        "Starting %s on a %dx%d board, length %d.",
        WINDOW_TITLE, config.width, config.height, len(game.snake),
    )

    running = True
    try:
        while running:
            delta_time = clock.tick(config.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        game.key_pressed(key_from_pygame(event.key))

            game.update(delta_time)

            screen.fill(BACKGROUND_COLOR)
            game.draw(renderer)
            pygame.display.flip()
    finally:
        pygame.quit()

    logger.info("Window closed with score %d.", game.score)
    return 0
