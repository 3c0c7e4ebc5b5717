"""Cube Snake: movement and collision core for a snake in a 3-D cube."""

from cube_snake.config import GameConfig
from cube_snake.engine import (
    GameEngine,
    TickResult,
    create_snake,
    is_bitten,
    is_out_of_bounds,
    tick,
    turn,
    turn_absolute,
)
from cube_snake.errors import CubeSnakeError, InvalidCommand, InvariantViolation
from cube_snake.grid import CellType, Cube, GridBounds, GridPoint, in_bounds
from cube_snake.heading import Heading, heading_from_id, heading_from_vector, vector_of
from cube_snake.snake import Snake

__all__ = [
    "CellType",
    "Cube",
    "CubeSnakeError",
    "GameConfig",
    "GameEngine",
    "GridBounds",
    "GridPoint",
    "Heading",
    "InvalidCommand",
    "InvariantViolation",
    "Snake",
    "TickResult",
    "create_snake",
    "heading_from_id",
    "heading_from_vector",
    "in_bounds",
    "is_bitten",
    "is_out_of_bounds",
    "tick",
    "turn",
    "turn_absolute",
    "vector_of",
]
