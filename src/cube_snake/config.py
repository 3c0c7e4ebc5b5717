"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

MIN_CUBE_SIZE = 5
MAX_PLAYERS = 4


@dataclass(frozen=True)
class GameConfig:
    """Settings for a cube snake game.

    Supports JSON serialization for reproducible runs.
    """

    size: int = 8
    player_count: int = 1
    tick_interval_ms: int = 1500
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.size < MIN_CUBE_SIZE:
            raise ValueError(f"size must be at least {MIN_CUBE_SIZE}.")
        if not 1 <= self.player_count <= MAX_PLAYERS:
            raise ValueError(f"player_count must be between 1 and {MAX_PLAYERS}.")
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")

    def to_dict(self) -> dict:
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
