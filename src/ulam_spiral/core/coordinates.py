"""Integrate a direction stream into grid coordinates."""

from __future__ import annotations

import sys
from typing import Generic, Iterable, Iterator, NamedTuple, TypeVar

from ulam_spiral.core.direction import Direction
from ulam_spiral.errors import SpiralOverflowError

T = TypeVar("T")


class Coordinate(NamedTuple):
    """Signed grid position; rows grow downward, columns grow rightward."""
    row: int
    col: int

    def step(self, direction: Direction) -> Coordinate:
        """Return the neighbouring coordinate one unit toward ``direction``."""
        d_row, d_col = direction.delta
        return Coordinate(self.row + d_row, self.col + d_col)


class CoordinateMapper(Generic[T]):
    """Turn ``(item, Direction)`` pairs into ``(item, Coordinate)`` pairs.

    The coordinate emitted with an item is the position before its direction
    is applied, so the first item always lands on the origin. Items are passed
    through untouched, which lets the mapper wrap any producer of
    direction-tagged values, not only SpiralSequencer.

    Args:
        pairs: Iterable of ``(item, Direction)``.
        origin: Starting coordinate.
        max_offset: Largest absolute row or column allowed. Once the running
            position passes it, the next request raises SpiralOverflowError
            without pulling another input item.
    """

    def __init__(
        self,
        pairs: Iterable[tuple[T, Direction]],
        origin: tuple[int, int] = (0, 0),
        max_offset: int = sys.maxsize,
    ):
        self._pairs = iter(pairs)
        self.position = Coordinate(*origin)
        self.max_offset = max_offset

    def __iter__(self) -> Iterator[tuple[T, Coordinate]]:
        return self

    def __next__(self) -> tuple[T, Coordinate]:
        current = self.position
        if abs(current.row) > self.max_offset or abs(current.col) > self.max_offset:
            raise SpiralOverflowError(
                f"Coordinate {tuple(current)} exceeds max_offset={self.max_offset}"
            )
        item, direction = next(self._pairs)
        self.position = current.step(direction)
        return item, current


def to_coordinates(
    pairs: Iterable[tuple[T, Direction]],
    origin: tuple[int, int] = (0, 0),
    max_offset: int = sys.maxsize,
) -> CoordinateMapper[T]:
    """Wrap ``pairs`` in a CoordinateMapper starting at ``origin``."""
    return CoordinateMapper(pairs, origin=origin, max_offset=max_offset)
