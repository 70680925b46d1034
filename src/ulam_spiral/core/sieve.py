"""Independent primality reference.

The spiral computes primality incrementally; these helpers answer the same
question from scratch so generated prefixes can be cross-checked.
"""

from __future__ import annotations

import numpy as np


def _numpy_sieve(limit: int) -> np.ndarray:
    """NumPy Sieve of Eratosthenes.

    Returns:
        Boolean array of length limit + 1 where entry i is True if i is prime.
    """
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[:2] = False

    for i in range(2, int(np.sqrt(limit)) + 1):
        if is_prime[i]:
            is_prime[i*i::i] = False

    return is_prime


def prime_sieve_mask(limit: int) -> np.ndarray:
    """Generate a boolean mask where mask[i] is True if i is prime.

    Args:
        limit: Size of the mask (0 to limit-1).

    Returns:
        Boolean array of length limit.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    if limit < 2:
        return np.zeros(limit, dtype=bool)

    return _numpy_sieve(limit - 1)


def is_prime(n: int) -> bool:
    """Check if a single number is prime.

    Uses 6k +/- 1 optimization for efficiency.
    """
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6

    return True
