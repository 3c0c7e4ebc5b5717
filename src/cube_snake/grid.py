"""Cube geometry and the per-cell lighting surface."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np


class GridPoint(NamedTuple):
    """An integer (x, y, z) cell address. Bounds are not checked."""

    x: int
    y: int
    z: int

    def offset(self, vector: tuple[int, int, int], steps: int = 1) -> GridPoint:
        """Return the point *steps* times *vector* away from this one."""
        dx, dy, dz = vector
        return GridPoint(self.x + dx * steps, self.y + dy * steps, self.z + dz * steps)


@dataclass(frozen=True)
class GridBounds:
    """An N×N×N cube of cells addressed from 0 to ``size - 1``."""

    size: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("Cube size must be at least 1.")

    def in_bounds(self, point: tuple[int, int, int]) -> bool:
        """Check whether every coordinate of *point* lies in ``[0, size)``."""
        return all(0 <= c < self.size for c in point)


def in_bounds(point: tuple[int, int, int], bounds: GridBounds) -> bool:
    """Module-level alias of :meth:`GridBounds.in_bounds`."""
    return bounds.in_bounds(point)


def random_point(
    bounds: GridBounds,
    margin: int = 0,
    rng: np.random.Generator | None = None,
) -> GridPoint:
    """Pick a uniformly random cell at least *margin* cells from every face.

    Every coordinate is drawn from ``[margin, size - margin)``.
    """
    low, high = margin, bounds.size - margin
    if margin < 0 or low >= high:
        raise ValueError(
            f"No cell lies {margin} cells away from the faces of a "
            f"cube of size {bounds.size}."
        )
    rng = rng if rng is not None else np.random.default_rng()
    x, y, z = rng.integers(low, high, size=3).tolist()
    return GridPoint(x, y, z)


class CellType(enum.IntEnum):
    """Integer codes stored in the cube array."""

    EMPTY = 0
    SNAKE = 1
    FRUIT = 2


class Cube:
    """NumPy-backed lighting surface mirroring what the cube displays.

    Cells are indexed ``[x, y, z]``. The surface is written by the game
    driver after each tick and never consulted for collision checks.
    """

    def __init__(self, bounds: GridBounds) -> None:
        self.bounds = bounds
        size = bounds.size
        self.cells = np.zeros((size, size, size), dtype=np.int8)

    def clear(self) -> None:
        """Switch every cell off."""
        self.cells[:] = CellType.EMPTY

    def get(self, point: GridPoint) -> CellType:
        """Return the cell type at *point*."""
        x, y, z = point
        return CellType(self.cells[x, y, z])

    def set(self, point: GridPoint, cell_type: CellType) -> None:
        """Set the cell type at *point*."""
        x, y, z = point
        self.cells[x, y, z] = cell_type

    def switch_on(self, point: GridPoint) -> None:
        """Light *point* as a snake segment."""
        self.set(point, CellType.SNAKE)

    def switch_off(self, point: GridPoint) -> None:
        """Turn *point* off."""
        self.set(point, CellType.EMPTY)

    def empty_cells(self) -> list[GridPoint]:
        """Return every cell that is currently off."""
        xs, ys, zs = np.where(self.cells == CellType.EMPTY)
        return [
            GridPoint(x, y, z)
            for x, y, z in zip(xs.tolist(), ys.tolist(), zs.tolist(), strict=True)
        ]

    def to_dict(self) -> dict:
        """Serialize the surface to a dictionary."""
        return {
            "size": self.bounds.size,
            "cells": self.cells.tolist(),
        }
