"""Core sieve, classification predicates and reference primes."""

from prime_profile.core.sieve import PrimeSet, Sink, collect, sieve, sieve_of_eratosthenes
from prime_profile.core.predicates import digit_square_sum, is_happy, is_super, sexy_emissions
from prime_profile.core.reference import matches_reference, reference_primes

__all__ = [
    "PrimeSet",
    "Sink",
    "collect",
    "sieve",
    "sieve_of_eratosthenes",
    "digit_square_sum",
    "is_happy",
    "is_super",
    "sexy_emissions",
    "matches_reference",
    "reference_primes",
]
