"""Key tokens delivered by the input source."""

from __future__ import annotations

import enum

from grid_snake.snake import Direction


class Key(enum.Enum):
    """Discrete key presses understood by the game.

    Movement has two equivalent bindings (WASD and the arrow keys). Any key
    outside this set is reported as ``OTHER``.
    """

    PAUSE = "pause"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    OTHER = "other"


_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.W: Direction.UP,
    Key.S: Direction.DOWN,
    Key.A: Direction.LEFT,
    Key.D: Direction.RIGHT,
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


def direction_for(key: Key) -> Direction | None:
    """Return the movement direction bound to *key*, if any."""
    return _KEY_DIRECTIONS.get(key)
