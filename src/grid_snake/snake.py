"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque

Cell = tuple[int, int]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    The y axis grows downwards (screen coordinates), so ``UP`` decrements y.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the direction that would reverse the snake onto itself."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body cells.

    The head is ``body[0]``; the tail is ``body[-1]``. The cell dropped from
    the tail by the latest move is cached so that eating can restore it.
    """

    def __init__(self, x: int, y: int) -> None:
        self.body: deque[Cell] = deque([(x + 2, y), (x + 1, y), (x, y)])
        self.direction = Direction.RIGHT
        self._last_tail: Cell | None = None

    def head_position(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def head_direction(self) -> Direction:
        return self.direction

    def next_head(self, direction: Direction | None = None) -> Cell:
        """Compute the next head position without moving.

        *direction* replaces the current direction for this lookahead only.
        """
        moving = self.direction if direction is None else direction
        dx, dy = moving.value
        x, y = self.head_position()
        return x + dx, y + dy

    def move_forward(self, direction: Direction | None = None) -> None:
        """Move one cell, keeping the length unchanged."""
        if direction is not None:
            self.direction = direction
        self.body.appendleft(self.next_head())
        self._last_tail = self.body.pop()

    def grow_tail(self) -> None:
        """Re-append the tail cell removed by the preceding move."""
        if self._last_tail is None:
            raise RuntimeError("grow_tail() requires a preceding move_forward().")
        self.body.append(self._last_tail)
        self._last_tail = None

    def is_overlapping(self, x: int, y: int) -> bool:
        """Check whether any body cell, head included, is at (x, y)."""
        return (x, y) in self.body

    def __len__(self) -> int:
        return len(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(cell) for cell in self.body],
            "direction": self.direction.name.lower(),
        }
