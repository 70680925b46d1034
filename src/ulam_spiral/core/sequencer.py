"""Spiral walk sequencer.

Produces the integers 1, 2, 3, ... in Ulam spiral order. Each element is a
``(NumberRecord, Direction)`` pair where the direction is the heading the walk
takes when it leaves that number. The walk starts heading right and turns left
after every leg; leg lengths run 1, 1, 2, 2, 3, 3, ...

Primality is decided by trial division against the primes already emitted,
so the sequencer is unbounded and needs no precomputed sieve.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from ulam_spiral.core.direction import Direction
from ulam_spiral.errors import SpiralOverflowError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NumberRecord:
    """A generated integer and its primality."""
    value: int
    is_prime: bool


@dataclass
class WalkState:
    """Mutable walk state owned by a single SpiralSequencer.

    Attributes:
        current_direction: Heading emitted with the current number.
        steps_until_turn: Steps left in the current leg, counting the one
            about to be taken.
        leg_length: Target length of the current leg.
        grow_on_next_turn: When set, the next turn also lengthens the leg.
        known_primes: Every prime <= last_value, ascending.
        last_value: Most recently generated integer.
    """
    current_direction: Direction = Direction.RIGHT
    steps_until_turn: int = 1
    leg_length: int = 1
    grow_on_next_turn: bool = False
    known_primes: list[int] = field(default_factory=list)
    last_value: int = 1


class SpiralSequencer:
    """Infinite iterator over ``(NumberRecord, Direction)`` in spiral order.

    A sequencer cannot be rewound; build a new one to start again from 1.

    Args:
        max_value: Largest integer the sequence may produce. Requesting the
            element after it raises SpiralOverflowError, and so does every
            later request.
    """

    def __init__(self, max_value: int = sys.maxsize):
        if max_value < 1:
            raise ValueError(f"max_value must be >= 1, got {max_value}")

        self.max_value = max_value
        self.state = WalkState()
        self._current = NumberRecord(value=1, is_prime=False)
        self._overflowed = False

    @property
    def current(self) -> NumberRecord:
        """Record that the next call to ``next()`` will emit."""
        return self._current

    def __iter__(self) -> SpiralSequencer:
        return self

    def __next__(self) -> tuple[NumberRecord, Direction]:
        if self._overflowed:
            raise SpiralOverflowError(
                f"Spiral value exceeded max_value={self.max_value}"
            )

        emitted = (self._current, self.state.current_direction)

        next_number = self.state.last_value + 1
        if next_number > self.max_value:
            logger.debug("Sequencer reached max_value=%d", self.max_value)
            self._overflowed = True
            return emitted

        self._advance(next_number)
        return emitted

    def _advance(self, next_number: int) -> None:
        state = self.state

        is_prime = self._is_prime(next_number)
        if is_prime:
            state.known_primes.append(next_number)

        state.last_value = next_number
        self._current = NumberRecord(value=next_number, is_prime=is_prime)

        if state.steps_until_turn == 1:
            state.current_direction = state.current_direction.turn_left()
            if state.grow_on_next_turn:
                state.leg_length += 1
            state.grow_on_next_turn = not state.grow_on_next_turn
            state.steps_until_turn = state.leg_length
        else:
            state.steps_until_turn -= 1

    def _is_prime(self, n: int) -> bool:
        """Trial division by the primes found so far.

        Any composite n has a prime factor p with p * p <= n, and every such
        p < n is already in known_primes.
        """
        for p in self.state.known_primes:
            if p * p > n:
                break
            if n % p == 0:
                return False
        return True
