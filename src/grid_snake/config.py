"""Launch-time configuration for a play session."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size, timing and window settings.

    Supports JSON serialization so a session can be reproduced.
    """

    # Board
    width: int = 30
    height: int = 30
    start_x: int = 2
    start_y: int = 2

    # Timing (seconds)
    moving_period: float = 0.1
    restart_time: float = 1.5

    # Apple placement
    seed: int | None = None

    # Window
    block_size: int = 25
    fps: int = 60

    def validate(self) -> None:
        """Raise ``ValueError`` if the settings cannot produce a playable board."""
        if self.width < 4 or self.height < 4:
            raise ValueError("Board dimensions must be at least 4×4.")
        # The initial snake spans start_x..start_x+2 and must sit inside the walls.
        if not (0 < self.start_x and self.start_x + 2 < self.width - 1):
            raise ValueError("Starting snake does not fit horizontally.")
        if not 0 < self.start_y < self.height - 1:
            raise ValueError("Starting snake does not fit vertically.")
        if (self.width - 2) * (self.height - 2) <= 3:
            raise ValueError("Board has no room for an apple.")
        if self.moving_period <= 0 or self.restart_time <= 0:
            raise ValueError("Timing values must be positive.")
        if self.block_size < 1 or self.fps < 1:
            raise ValueError("block_size and fps must be at least 1.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
