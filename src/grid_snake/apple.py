"""Apple spawning logic."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from grid_snake.board import Board
    from grid_snake.snake import Cell, Snake

logger = logging.getLogger(__name__)


@dataclass
class Apple:
    """The single apple on the board; mutated in place between placements."""

    exists: bool = False
    x: int = 0
    y: int = 0

    @property
    def position(self) -> Cell | None:
        return (self.x, self.y) if self.exists else None

    def is_at(self, x: int, y: int) -> bool:
        return self.exists and self.x == x and self.y == y

    def to_dict(self) -> dict:
        """Serialize apple state to a dictionary."""
        return {"exists": self.exists, "x": self.x, "y": self.y}


class AppleSpawner:
    """Places apples uniformly at random inside the border ring.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self, apple: Apple, snake: Snake) -> bool:
        """Move *apple* onto a random interior cell free of the snake.

        Candidates landing on the snake are rejected and redrawn. Returns
        ``False`` and leaves the apple absent if no free cell exists.
        """
        if len(snake.body) >= self.board.interior_size:
            logger.warning("No free interior cells available for the apple.")
            apple.exists = False
            return False

        x, y = self._sample()
        while snake.is_overlapping(x, y):
            x, y = self._sample()

        apple.x, apple.y = x, y
        apple.exists = True
        logger.debug("Apple placed at (%d, %d).", x, y)
        return True

    def _sample(self) -> Cell:
        x = int(self.rng.integers(1, self.board.width - 1))
        y = int(self.rng.integers(1, self.board.height - 1))
        return x, y
