"""Translate relative turn commands into absolute 3-D headings.

A player steers with four keys that mean up/down/left/right *as seen by
the snake*. While the snake moves horizontally its current heading is
enough to define that frame. While it climbs or falls the current heading
is purely vertical, so the heading it had before the last turn supplies
the missing forward axis.
"""

from __future__ import annotations

from cube_snake.errors import InvalidCommand
from cube_snake.heading import RELATIVE_COMMANDS, Heading, heading_from_vector


def resolve_turn(current: Heading, previous: Heading, command: Heading) -> Heading:
    """Return the absolute heading reached by applying *command*.

    The vector arithmetic is applied literally to any input; callers are
    expected to restrict *command* to :data:`RELATIVE_COMMANDS`.
    """
    cur_x, cur_y, cur_z = current.value
    prev_x, _, prev_z = previous.value
    cmd_x, cmd_y, _ = command.value
    climbing = abs(cur_y)

    x = (
        -cur_z * cmd_x
        - prev_z * climbing * cmd_x
        - prev_x * cur_y * cmd_y
    )
    y = cmd_y if cur_x != 0 or cur_z != 0 else 0
    z = (
        cur_x * cmd_x
        + prev_x * climbing * cmd_x
        - prev_z * cur_y * cmd_y
    )
    return heading_from_vector(x, y, z)


def validate_command(command: Heading) -> Heading:
    """Return *command* unchanged, or raise if it is not a relative command."""
    if command not in RELATIVE_COMMANDS:
        raise InvalidCommand(
            f"{command} is not a relative command; "
            "expected one of Up, Down, Left, Right."
        )
    return command
