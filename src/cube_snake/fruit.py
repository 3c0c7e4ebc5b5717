"""Fruit placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from cube_snake.grid import CellType

if TYPE_CHECKING:
    from cube_snake.grid import Cube, GridPoint

logger = logging.getLogger(__name__)


class FruitSpawner:
    """Keeps the single fruit of a game on an unlit cube cell.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        cube: Cube,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.cube = cube
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: GridPoint | None = None

    def spawn(self) -> GridPoint | None:
        """Place the fruit on a random empty cell, replacing any current one.

        Returns the new position, or ``None`` when the cube is full.
        """
        self.remove()
        empty = self.cube.empty_cells()
        if not empty:
            logger.warning("No empty cells available for fruit placement.")
            return None

        pos = empty[int(self.rng.integers(len(empty)))]
        self.cube.set(pos, CellType.FRUIT)
        self.position = pos
        return pos

    def remove(self) -> bool:
        """Take the fruit off the cube. Returns True if there was one."""
        if self.position is None:
            return False
        if self.cube.get(self.position) == CellType.FRUIT:
            self.cube.set(self.position, CellType.EMPTY)
        self.position = None
        return True

    def to_dict(self) -> dict:
        """Serialize fruit state to a dictionary."""
        return {
            "position": list(self.position) if self.position is not None else None,
        }
