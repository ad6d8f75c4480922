"""Board bounds and the lethal border ring."""

from __future__ import annotations

import numpy as np

from grid_snake.snake import Cell

Rect = tuple[int, int, int, int]


class Board:
    """Rectangular board whose outermost one-cell ring is a wall.

    Coordinates use (x, y) ordering; the border mask is indexed ``[y, x]``
    consistent with NumPy row-major layout.
    """

    def __init__(self, width: int = 30, height: int = 30) -> None:
        if width < 4 or height < 4:
            raise ValueError("Board dimensions must be at least 4×4.")
        self.width = width
        self.height = height
        self.border = np.zeros((height, width), dtype=bool)
        self.border[0, :] = True
        self.border[-1, :] = True
        self.border[:, 0] = True
        self.border[:, -1] = True

    @property
    def interior_size(self) -> int:
        """Number of cells strictly inside the border ring."""
        return (self.width - 2) * (self.height - 2)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and bool(self.border[y, x])

    def is_interior(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies strictly inside the border ring."""
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def border_cells(self) -> list[Cell]:
        """Return every cell of the border ring."""
        ys, xs = np.nonzero(self.border)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def border_rects(self) -> list[Rect]:
        """Return the top, right, bottom and left walls as (x, y, w, h)."""
        w, h = self.width, self.height
        return [
            (0, 0, w, 1),
            (w - 1, 0, 1, h),
            (0, h - 1, w, 1),
            (0, 0, 1, h),
        ]

    def to_dict(self) -> dict:
        """Serialize board dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
