"""Draw data and the renderer interface the game reports to."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from grid_snake.board import Rect
from grid_snake.snake import Cell

Color = tuple[int, int, int, int]

SNAKE_COLOR: Color = (0, 204, 25, 255)
APPLE_COLOR: Color = (204, 0, 0, 255)
BORDER_COLOR: Color = (0, 0, 0, 255)
GAME_OVER_COLOR: Color = (230, 0, 0, 128)
PAUSED_COLOR: Color = (40, 40, 40, 128)
TEXT_COLOR: Color = (255, 255, 255, 255)
BACKGROUND_COLOR: Color = (128, 128, 128, 255)

TEXT_SIZE = 32


class Renderer(Protocol):
    """Anything that can draw grid-aligned rectangles and text labels.

    Coordinates and sizes are in grid cells; scaling to device pixels is the
    renderer's business.
    """

    def draw_rect(
        self, color: Color, x: int, y: int, width: int, height: int,
    ) -> None: ...

    def draw_text(
        self, text: str, color: Color, size: int, position: Cell,
    ) -> None: ...


@dataclass(frozen=True)
class DrawData:
    """Read-only snapshot of everything visible on one frame."""

    width: int
    height: int
    snake: list[Cell]
    apple: Cell | None
    border: list[Rect]
    score: int = 0
    paused: bool = False
    game_over: bool = False

    @property
    def overlay(self) -> bool:
        """Whether a full-board overlay with the score is shown."""
        return self.paused or self.game_over

    @property
    def score_text(self) -> str | None:
        if not self.overlay:
            return None
        prefix = "Game over" if self.game_over else "Paused"
        return f"{prefix}! Score: {self.score}"


def draw(data: DrawData, renderer: Renderer) -> None:
    """Issue draw requests for *data*: snake, apple, walls, then overlay."""
    for x, y in data.snake:
        renderer.draw_rect(SNAKE_COLOR, x, y, 1, 1)

    if data.apple is not None:
        renderer.draw_rect(APPLE_COLOR, data.apple[0], data.apple[1], 1, 1)

    for x, y, w, h in data.border:
        renderer.draw_rect(BORDER_COLOR, x, y, w, h)

    if data.overlay:
        color = GAME_OVER_COLOR if data.game_over else PAUSED_COLOR
        renderer.draw_rect(color, 0, 0, data.width, data.height)
        renderer.draw_text(
            data.score_text, TEXT_COLOR, TEXT_SIZE,
            (2, data.height // 2),
        )
