"""Bounded prefixes of the spiral.

The sequencer and mapper are strictly sequential. Consumers that want to
work on many elements at once (vectorised rendering, parallel fan-out)
materialise a finite prefix here and share the immutable result.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice

import numpy as np

from ulam_spiral.core.coordinates import Coordinate, to_coordinates
from ulam_spiral.core.sequencer import NumberRecord, SpiralSequencer


def take_spiral(n: int) -> list[tuple[NumberRecord, Coordinate]]:
    """Return the first n ``(record, coordinate)`` pairs of a fresh spiral.

    Raises:
        ValueError: If n is negative.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return list(islice(to_coordinates(SpiralSequencer()), n))


@dataclass(frozen=True, eq=False)
class SpiralArrays:
    """Read-only column arrays for a spiral prefix.

    Index i holds the (i + 1)-th element of the spiral.
    """
    values: np.ndarray
    is_prime: np.ndarray
    rows: np.ndarray
    cols: np.ndarray

    def __len__(self) -> int:
        return len(self.values)

    def prime_values(self) -> np.ndarray:
        """Values flagged prime, in spiral order."""
        return self.values[self.is_prime]


def precompute_spiral(n: int) -> SpiralArrays:
    """Materialise the first n spiral elements as NumPy arrays.

    Args:
        n: Number of elements.

    Returns:
        SpiralArrays whose arrays are marked non-writeable.
    """
    pairs = take_spiral(n)

    values = np.fromiter((rec.value for rec, _ in pairs), dtype=np.int64, count=n)
    is_prime = np.fromiter((rec.is_prime for rec, _ in pairs), dtype=bool, count=n)
    rows = np.fromiter((c.row for _, c in pairs), dtype=np.int64, count=n)
    cols = np.fromiter((c.col for _, c in pairs), dtype=np.int64, count=n)

    for arr in (values, is_prime, rows, cols):
        arr.flags.writeable = False

    return SpiralArrays(values=values, is_prime=is_prime, rows=rows, cols=cols)
