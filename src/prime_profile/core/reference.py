"""Reference prime generation used to check sieve results.

A vectorised NumPy Sieve of Eratosthenes, independent of the incremental
sieve it verifies.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np


def reference_primes(limit: int) -> np.ndarray:
    """NumPy-based Sieve of Eratosthenes.

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Array of prime numbers up to limit. Empty if limit < 2.
    """
    if limit < 2:
        return np.array([], dtype=np.int64)

    sieve_mask = np.ones(limit + 1, dtype=bool)
    sieve_mask[0] = False
    sieve_mask[1] = False

    for i in range(2, int(np.sqrt(limit)) + 1):
        if sieve_mask[i]:
            sieve_mask[i*i::i] = False

    return np.nonzero(sieve_mask)[0].astype(np.int64)


def matches_reference(primes: Iterable[int], limit: int) -> bool:
    """Check that primes is exactly the ordered list of primes <= limit."""
    found = np.fromiter(primes, dtype=np.int64)
    expected = reference_primes(limit)
    return bool(np.array_equal(found, expected))
