"""prime_profile - a streaming prime classifier built to be profiled."""

__version__ = "0.1.0"

from prime_profile.config import FilterConfig
from prime_profile.core.sieve import PrimeSet, sieve, sieve_of_eratosthenes
from prime_profile.core.predicates import is_happy

__all__ = [
    "FilterConfig",
    "PrimeSet",
    "sieve",
    "sieve_of_eratosthenes",
    "is_happy",
]
