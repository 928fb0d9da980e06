"""Classification predicates applied to primes as the sieve discovers them.

Each predicate is a read-only query against the growing prime set; none of
them insert or remove primes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from prime_profile.core.sieve import PrimeSet

SEXY_GAP = 6


def digit_square_sum(n: int) -> int:
    """Sum the squares of the base-10 digits of n."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Check if n is a happy number.

    Repeatedly replaces n with the sum of the squares of its digits. Happy
    numbers reach 1; every unhappy number falls into the cycle containing 4.

    Args:
        n: Positive integer to check.

    Returns:
        True if n is happy, False otherwise.

    Raises:
        ValueError: If n is zero or negative.
    """
    if n < 1:
        raise ValueError(f"The number {n} is neither happy nor unhappy")

    while n != 1 and n != 4:
        n = digit_square_sum(n)

    return n == 1


def is_super(primes: PrimeSet, candidate: int) -> bool:
    """Check if the most recently inserted prime is a super prime.

    Args:
        primes: Prime set with candidate as its last element.
        candidate: The prime just inserted.

    Returns:
        True if the discovery rank of candidate is itself prime.
    """
    return len(primes) in primes


def sexy_emissions(primes: PrimeSet, candidate: int) -> list[int]:
    """Values to emit for candidate when only sexy primes are accepted.

    A prime is sexy when candidate - 6 is also prime. If the lower partner
    had no partner of its own below it, it was skipped when discovered and
    is emitted here first, so emissions can be out of numeric order.

    Args:
        primes: Prime set containing every prime up to candidate.
        candidate: The prime just inserted.

    Returns:
        Values to pass to the sink, in order. Empty if candidate is rejected.
    """
    partner = candidate - SEXY_GAP
    if partner not in primes:
        return []

    if candidate > SEXY_GAP and partner - SEXY_GAP not in primes:
        return [partner, candidate]

    return [candidate]
