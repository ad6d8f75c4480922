"""Time-driven game engine composing board, snake, and apple logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from grid_snake import render
from grid_snake.apple import Apple, AppleSpawner
from grid_snake.board import Board
from grid_snake.config import GameConfig
from grid_snake.keys import Key, direction_for
from grid_snake.render import DrawData, Renderer
from grid_snake.snake import Cell, Direction, Snake

logger = logging.getLogger(__name__)

MOVING_PERIOD = 0.1  # seconds between autonomous moves
RESTART_TIME = 1.5  # seconds spent on the game-over screen


class GameState(enum.Enum):
    """Finite states of a play session."""

    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Game:
    """Single-snake game driven by key presses and frame time.

    The external loop calls :meth:`key_pressed` for each input event, then
    :meth:`update` once per frame, then :meth:`draw`. The snake moves every
    *moving_period* seconds, or immediately when a direction key is pressed.
    """

    def __init__(
        self,
        width: int = 30,
        height: int = 30,
        *,
        moving_period: float = MOVING_PERIOD,
        restart_time: float = RESTART_TIME,
        start: Cell = (2, 2),
        seed: int | None = None,
    ) -> None:
        self.board = Board(width=width, height=height)
        start_x, start_y = start
        if not (
            self.board.is_interior(start_x, start_y)
            and self.board.is_interior(start_x + 2, start_y)
        ):
            raise ValueError("Starting snake must lie inside the border.")
        self.start = start
        self.moving_period = moving_period
        self.restart_time = restart_time
        self.rng = np.random.default_rng(seed)

        self.snake = Snake(start_x, start_y)
        self.apple = Apple()
        self.apple_spawner = AppleSpawner(self.board, rng=self.rng)
        self.apple_spawner.place(self.apple, self.snake)

        self.score = 0
        self.state = GameState.RUNNING
        self.waiting_time = 0.0

    @classmethod
    def from_config(cls, config: GameConfig) -> Game:
        """Build a game from a validated :class:`GameConfig`."""
        config.validate()
        return cls(
            config.width,
            config.height,
            moving_period=config.moving_period,
            restart_time=config.restart_time,
            start=(config.start_x, config.start_y),
            seed=config.seed,
        )

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def key_pressed(self, key: Key) -> None:
        """React to one key press.

        Every key that is not ignored triggers an immediate move attempt.
        Keys without a direction binding, the pause key included, keep the
        current direction.
        """
        if self.game_over:
            return

        if key is Key.PAUSE:
            self.toggle_pause()

        direction = direction_for(key)
        reverse = self.snake.head_direction().opposite()
        if direction is not None and direction == reverse:
            return

        self.update_snake(direction)

    def update(self, delta_time: float) -> None:
        """Advance the clock by *delta_time* seconds."""
        self.waiting_time += delta_time

        if self.game_over:
            if self.waiting_time > self.restart_time:
                self.restart()
            return

        if not self.apple.exists:
            self.apple_spawner.place(self.apple, self.snake)

        if self.waiting_time > self.moving_period:
            self.update_snake()

    def update_snake(self, direction: Direction | None = None) -> None:
        """Run one movement tick, optionally turning to *direction* first.

        While paused a valid tick leaves the body untouched; a fatal next
        cell still ends the game.
        """
        if self._is_snake_alive(direction):
            if not self.paused:
                self.snake.move_forward(direction)
                self._check_eaten()
        else:
            self._end_game()

        self.waiting_time = 0.0

    def toggle_pause(self) -> None:
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.RUNNING
        logger.debug("Game state is now %s.", self.state.value)

    def restart(self) -> None:
        """Reset snake, apple, score, and timer for a new round."""
        self.snake = Snake(*self.start)
        self.apple.exists = False
        self.apple_spawner.place(self.apple, self.snake)
        self.score = 0
        self.state = GameState.RUNNING
        self.waiting_time = 0.0
        logger.info("Game restarted.")

    def draw_data(self) -> DrawData:
        """Return what the renderer should show for the current state."""
        return DrawData(
            width=self.width,
            height=self.height,
            snake=list(self.snake.body),
            apple=self.apple.position,
            border=self.board.border_rects(),
            score=self.score,
            paused=self.paused,
            game_over=self.game_over,
        )

    def draw(self, renderer: Renderer) -> None:
        render.draw(self.draw_data(), renderer)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "state": self.state.value,
            "score": self.score,
            "waiting_time": self.waiting_time,
            "board": self.board.to_dict(),
            "snake": self.snake.to_dict(),
            "apple": self.apple.to_dict(),
        }

    def _is_snake_alive(self, direction: Direction | None) -> bool:
        next_x, next_y = self.snake.next_head(direction)
        if self.snake.is_overlapping(next_x, next_y):
            return False
        return self.board.is_interior(next_x, next_y)

    def _check_eaten(self) -> None:
        head_x, head_y = self.snake.head_position()
        if self.apple.is_at(head_x, head_y):
            self.apple.exists = False
            self.snake.grow_tail()
            self.score += 1
            logger.debug(
                "Apple eaten at (%d, %d); score %d.", head_x, head_y, self.score,
            )

    def _end_game(self) -> None:
        self.state = GameState.GAME_OVER
        logger.info(
            "Game over with score %d and length %d.",
            self.score, len(self.snake),
        )
