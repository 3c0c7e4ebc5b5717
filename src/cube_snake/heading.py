"""The seven axis-aligned headings a snake can move along."""

from __future__ import annotations

import enum


class Heading(enum.Enum):
    """Absolute movement headings with (dx, dy, dz) unit vectors.

    ``NOWHERE`` carries the zero vector and stands in for "no heading".
    """

    UP = (0, 1, 0)
    DOWN = (0, -1, 0)
    LEFT = (-1, 0, 0)
    RIGHT = (1, 0, 0)
    AHEAD = (0, 0, -1)
    BACK = (0, 0, 1)
    NOWHERE = (0, 0, 0)

    @property
    def x(self) -> int:
        return self.value[0]

    @property
    def y(self) -> int:
        return self.value[1]

    @property
    def z(self) -> int:
        return self.value[2]

    def __str__(self) -> str:
        return self.name.capitalize()


# Ordinal ids used when picking a random start heading. 0 is unassigned.
_BY_ID: dict[int, Heading] = {
    1: Heading.UP,
    2: Heading.DOWN,
    3: Heading.LEFT,
    4: Heading.RIGHT,
    5: Heading.AHEAD,
    6: Heading.BACK,
}

# Headings a snake may start with; it never starts climbing or falling.
PLANAR_HEADINGS: tuple[Heading, ...] = (
    Heading.LEFT,
    Heading.RIGHT,
    Heading.AHEAD,
    Heading.BACK,
)

# Commands accepted by the relative turn resolver.
RELATIVE_COMMANDS: frozenset[Heading] = frozenset({
    Heading.UP,
    Heading.DOWN,
    Heading.LEFT,
    Heading.RIGHT,
})


def vector_of(heading: Heading) -> tuple[int, int, int]:
    """Return the fixed (dx, dy, dz) vector of *heading*."""
    return heading.value


def heading_from_id(heading_id: int) -> Heading:
    """Map an ordinal id in 1..6 to a heading; anything else is NOWHERE."""
    return _BY_ID.get(heading_id, Heading.NOWHERE)


def heading_from_vector(x: int, y: int, z: int) -> Heading:
    """Classify a vector, checking the y axis first, then x, then z.

    Only the first axis holding +1 or -1 decides the result, so a vector
    such as (1, 1, 0) is classified as UP.
    """
    if y == 1:
        return Heading.UP
    if y == -1:
        return Heading.DOWN
    if x == 1:
        return Heading.RIGHT
    if x == -1:
        return Heading.LEFT
    if z == 1:
        return Heading.BACK
    if z == -1:
        return Heading.AHEAD
    return Heading.NOWHERE
