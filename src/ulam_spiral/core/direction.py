"""Compass directions for the spiral walk."""

from __future__ import annotations

from enum import Enum


class Direction(Enum):
    """Heading of the spiral walk on a grid whose rows grow downward."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def turn_left(self) -> Direction:
        """Rotate 90 degrees counterclockwise."""
        return _LEFT_TURNS[self]

    @property
    def delta(self) -> tuple[int, int]:
        """Unit (row, col) step taken when moving in this direction."""
        return _DELTAS[self]


_LEFT_TURNS = {
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.UP,
}

_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}
