"""Cross-checks for a generated spiral prefix.

Recomputes primality with an independent sieve and re-derives the walk
geometry from the emitted directions and coordinates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import groupby, islice
from typing import Iterable, List, Tuple

import numpy as np

from ulam_spiral.core.coordinates import to_coordinates
from ulam_spiral.core.direction import Direction
from ulam_spiral.core.sequencer import NumberRecord, SpiralSequencer
from ulam_spiral.core.sieve import prime_sieve_mask

logger = logging.getLogger(__name__)


def expected_leg_length(leg: int) -> int:
    """Length of the zero-based leg-th leg: 1, 1, 2, 2, 3, 3, ..."""
    return leg // 2 + 1


@dataclass
class VerificationReport:
    """Outcome of verify_prefix."""
    count: int
    prime_mismatches: List[int] = field(default_factory=list)
    coordinate_breaks: List[int] = field(default_factory=list)
    bad_legs: List[int] = field(default_factory=list)
    bad_turns: List[int] = field(default_factory=list)
    duplicate_coordinates: int = 0
    leg_lengths: List[int] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not (
            self.prime_mismatches
            or self.coordinate_breaks
            or self.bad_legs
            or self.bad_turns
            or self.duplicate_coordinates
        )


def verify_prefix(
    n: int,
    source: Iterable[Tuple[NumberRecord, Direction]] | None = None,
) -> VerificationReport:
    """Check the first n elements of a spiral stream.

    Checks:
        - is_prime agrees with a NumPy sieve for every value.
        - Each coordinate is the previous one stepped by the previous direction.
        - Leg lengths run 1, 1, 2, 2, 3, 3, ... (the final leg may be partial).
        - Each leg turns left from the one before.
        - No two values share a coordinate.

    Args:
        n: Number of elements, >= 1.
        source: Stream of (record, direction) pairs to check. Defaults to a
            fresh SpiralSequencer.

    Returns:
        VerificationReport describing any violations.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")

    if source is None:
        source = SpiralSequencer()

    pairs = list(islice(source, n))
    if not pairs:
        raise ValueError("source produced no elements")
    n = len(pairs)
    mapped = list(to_coordinates(pairs))
    report = VerificationReport(count=n)

    values = np.array([rec.value for rec, _ in pairs], dtype=np.int64)
    flags = np.array([rec.is_prime for rec, _ in pairs], dtype=bool)
    mask = prime_sieve_mask(int(values.max()) + 1)
    report.prime_mismatches = values[mask[values] != flags].tolist()

    directions = [d for _, d in pairs]
    coords = [c for _, c in mapped]
    for i in range(n - 1):
        if coords[i + 1] != coords[i].step(directions[i]):
            report.coordinate_breaks.append(i)

    report.duplicate_coordinates = n - len(set(coords))

    legs = [(d, len(list(run))) for d, run in groupby(directions)]
    report.leg_lengths = [length for _, length in legs]
    for i, (direction, length) in enumerate(legs):
        expected = expected_leg_length(i)
        last = i == len(legs) - 1
        if length > expected or (length < expected and not last):
            report.bad_legs.append(i)
        if i > 0 and direction != legs[i - 1][0].turn_left():
            report.bad_turns.append(i)

    logger.debug("Verified %d elements: passed=%s", n, report.passed)
    return report
