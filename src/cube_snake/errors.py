"""Exception types raised by the cube snake core."""

from __future__ import annotations


class CubeSnakeError(Exception):
    """Base class for all cube snake errors."""


class InvariantViolation(CubeSnakeError, RuntimeError):
    """A snake's internal state broke a structural contract.

    Raised for programming errors only (e.g. shrinking a body that has a
    single segment left). Never caught inside the package.
    """


class InvalidCommand(CubeSnakeError, ValueError):
    """A relative turn command outside Up/Down/Left/Right was given."""
