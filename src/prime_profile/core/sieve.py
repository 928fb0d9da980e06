"""Incremental trial-division sieve with streaming classification.

Candidates are tested only against the primes discovered so far, so the
prime set grows as the sieve advances. Each new prime can be screened by
the super, happy and sexy predicates before it is passed to a sink.

Not very efficient, just something with a predictable profile.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional

from prime_profile.config import FilterConfig
from prime_profile.core.predicates import is_happy, is_super, sexy_emissions

logger = logging.getLogger(__name__)

Sink = Callable[[int], None]


class PrimeSet:
    """Insertion-ordered set of discovered primes.

    Keeps a list for order and rank, plus a set for fast membership.
    """

    def __init__(self) -> None:
        self._order: list[int] = []
        self._members: set[int] = set()

    def add(self, prime: int) -> int:
        """Insert a prime and return its 1-based discovery rank."""
        if prime in self._members:
            raise ValueError(f"{prime} is already in the prime set")
        if self._order and prime <= self._order[-1]:
            raise ValueError(
                f"Primes must be inserted in increasing order, got {prime} after {self._order[-1]}"
            )
        self._order.append(prime)
        self._members.add(prime)
        return len(self._order)

    def rank(self, prime: int) -> int:
        """Return the 1-based discovery rank of a prime in the set."""
        if prime not in self._members:
            raise KeyError(prime)
        return self._order.index(prime) + 1

    def to_list(self) -> list[int]:
        return list(self._order)

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[int]:
        return iter(self._order)

    def __getitem__(self, index):
        return self._order[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PrimeSet):
            return self._order == other._order
        if isinstance(other, (list, tuple)):
            return self._order == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if len(self._order) > 10:
            head = ", ".join(str(p) for p in self._order[:10])
            return f"PrimeSet([{head}, ...], size={len(self._order)})"
        return f"PrimeSet({self._order})"


def _discard(value: int) -> None:
    pass


def sieve_of_eratosthenes(
    max_value: int,
    only_super: bool = False,
    only_happy: bool = False,
    only_sexy: bool = False,
    sink: Optional[Sink] = None,
) -> PrimeSet:
    """Find all primes up to max_value, sending some of them to a sink.

    Every prime found is kept in the returned set. The filters only decide
    which primes reach the sink, and are checked in the order super, happy,
    sexy. With only_sexy, the lower member of a pair may be sent to the
    sink just before the upper one, out of numeric order.

    Combining only_sexy with the other filters gives unreliable output: a
    lower partner is caught up without being checked against them.

    Args:
        max_value: Largest candidate to test (inclusive). Values below 2
            give an empty set.
        only_super: Only accept primes whose discovery rank is also prime.
        only_happy: Only accept happy primes.
        only_sexy: Only accept primes that differ by 6 from another prime.
        sink: Called once per accepted prime. Defaults to discarding.

    Returns:
        All primes found, in increasing order, regardless of filtering.
    """
    accept = sink if sink is not None else _discard
    primes = PrimeSet()

    logger.debug(
        "Sieving to %d (super=%s, happy=%s, sexy=%s)",
        max_value, only_super, only_happy, only_sexy,
    )

    for candidate in range(2, max_value + 1):
        # Only the known primes need to be tried as divisors.
        if any(candidate % p == 0 for p in primes):
            continue

        primes.add(candidate)

        if only_super and not is_super(primes, candidate):
            continue
        if only_happy and not is_happy(candidate):
            continue
        if only_sexy:
            for value in sexy_emissions(primes, candidate):
                accept(value)
            continue

        accept(candidate)

    logger.debug("Found %d primes up to %d", len(primes), max_value)

    return primes


def sieve(max_value: int, config: Optional[FilterConfig] = None, sink: Optional[Sink] = None) -> PrimeSet:
    """Run the sieve with filter switches taken from a FilterConfig."""
    if config is None:
        config = FilterConfig()

    return sieve_of_eratosthenes(
        max_value,
        only_super=config.only_super,
        only_happy=config.only_happy,
        only_sexy=config.only_sexy,
        sink=sink,
    )


def collect(
    max_value: int,
    config: Optional[FilterConfig] = None,
) -> tuple[PrimeSet, list[int]]:
    """Run the sieve and gather the emitted values in emission order.

    Returns:
        Tuple of (all primes, emitted values).
    """
    emitted: list[int] = []
    primes = sieve(max_value, config, emitted.append)
    return primes, emitted

