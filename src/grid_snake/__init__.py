"""Grid Snake — core game engine."""

from grid_snake.apple import Apple, AppleSpawner
from grid_snake.board import Board
from grid_snake.config import GameConfig
from grid_snake.engine import Game, GameState
from grid_snake.keys import Key
from grid_snake.render import DrawData, Renderer
from grid_snake.snake import Direction, Snake

__all__ = [
    "Apple",
    "AppleSpawner",
    "Board",
    "Direction",
    "DrawData",
    "Game",
    "GameConfig",
    "GameState",
    "Key",
    "Renderer",
    "Snake",
]
