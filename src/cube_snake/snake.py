"""Snake body representation and heading state."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

import numpy as np

from cube_snake.errors import InvariantViolation
from cube_snake.grid import GridBounds, GridPoint, random_point
from cube_snake.heading import Heading, heading_from_id
from cube_snake.turning import resolve_turn, validate_command

INITIAL_LENGTH = 3
# Distance kept between a new head and every face so the tail fits.
SPAWN_MARGIN = INITIAL_LENGTH - 1


class Snake:
    """A snake represented as an ordered deque of grid points.

    The head is ``body[0]``; the tail is ``body[-1]``. ``previous_heading``
    is the heading the snake had before its most recent relative turn.
    """

    def __init__(
        self,
        points: Iterable[GridPoint],
        heading: Heading,
        previous_heading: Heading = Heading.NOWHERE,
    ) -> None:
        self.body: deque[GridPoint] = deque(GridPoint(*p) for p in points)
        if not self.body:
            raise ValueError("Snake must have at least 1 segment.")
        self.heading = heading
        self.previous_heading = previous_heading
        self.bitten = False

    @classmethod
    def spawn(
        cls,
        bounds: GridBounds,
        rng: np.random.Generator | None = None,
    ) -> Snake:
        """Create a 3-segment snake at a random position and planar heading."""
        rng = rng if rng is not None else np.random.default_rng()
        head = random_point(bounds, SPAWN_MARGIN, rng)
        heading = heading_from_id(int(rng.integers(3, 7)))
        points = [head.offset(heading.value, -i) for i in range(INITIAL_LENGTH)]
        return cls(points, heading)

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[GridPoint]:
        return iter(self.body)

    @property
    def head(self) -> GridPoint:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> GridPoint:
        """Return the tail coordinate."""
        return self.body[-1]

    def next_head(self) -> GridPoint:
        """Compute the next head position without moving."""
        return self.head.offset(self.heading.value)

    def occupies(self, point: GridPoint) -> bool:
        """Check whether any segment, tail included, sits on *point*."""
        return point in self.body

    def grow_head(self, point: GridPoint) -> None:
        """Prepend *point* as the new head."""
        self.body.appendleft(GridPoint(*point))

    def shrink_tail(self) -> GridPoint:
        """Remove and return the tail segment."""
        if len(self.body) <= 1:
            raise InvariantViolation(
                f"Cannot shrink a snake of length {len(self.body)}."
            )
        return self.body.pop()

    def mark_bitten(self) -> None:
        """Record that the snake ran into itself. Never cleared."""
        self.bitten = True

    def turn(self, command: Heading) -> Heading:
        """Apply a relative command and return the new absolute heading.

        Raises :class:`InvalidCommand` for anything but Up/Down/Left/Right,
        leaving the headings untouched.
        """
        validate_command(command)
        new_heading = resolve_turn(self.heading, self.previous_heading, command)
        self.previous_heading = self.heading
        self.heading = new_heading
        return new_heading

    def set_heading(self, heading: Heading) -> None:
        """Point the snake at an absolute heading; history is kept as is."""
        self.heading = heading

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(p) for p in self.body],
            "heading": str(self.heading),
            "previous_heading": str(self.previous_heading),
            "bitten": self.bitten,
        }
