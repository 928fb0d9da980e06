"""Tests for the incremental sieve and its filters."""

import numpy as np
import pytest

from prime_profile.config import FilterConfig
from prime_profile.core.reference import reference_primes
from prime_profile.core.sieve import (
    PrimeSet,
    collect,
    sieve,
    sieve_of_eratosthenes,
)


class TestPrimeSet:
    """Tests for PrimeSet class."""

    def test_add_returns_rank(self):
        """Test that add returns the 1-based discovery rank."""
        primes = PrimeSet()
        assert primes.add(2) == 1
        assert primes.add(3) == 2
        assert primes.add(5) == 3
        assert len(primes) == 3

    def test_membership_and_order(self):
        """Test membership and insertion order."""
        primes = PrimeSet()
        for p in [2, 3, 5, 7]:
            primes.add(p)

        assert 5 in primes
        assert 4 not in primes
        assert list(primes) == [2, 3, 5, 7]
        assert primes[0] == 2
        assert primes[-1] == 7
        assert primes.rank(7) == 4

    def test_rank_of_missing_value(self):
        """Test that rank of a non-member raises."""
        primes = PrimeSet()
        primes.add(2)
        with pytest.raises(KeyError):
            primes.rank(3)

    def test_rejects_out_of_order_insert(self):
        """Test that values must be inserted in increasing order."""
        primes = PrimeSet()
        primes.add(5)
        with pytest.raises(ValueError):
            primes.add(3)
        with pytest.raises(ValueError):
            primes.add(5)

    def test_equality(self):
        """Test equality with other sets and plain sequences."""
        a = PrimeSet()
        b = PrimeSet()
        for p in [2, 3, 5]:
            a.add(p)
            b.add(p)

        assert a == b
        assert a == [2, 3, 5]
        assert a != [2, 3]


class TestSieve:
    """Tests for sieve_of_eratosthenes without filters."""

    def test_primes_up_to_10(self):
        """Test primes up to 10."""
        assert sieve_of_eratosthenes(10) == [2, 3, 5, 7]

    def test_primes_up_to_600(self):
        """Test the number of primes up to 600."""
        consumer = []
        primes = sieve_of_eratosthenes(600, sink=consumer.append)

        assert len(primes) == 109
        assert consumer == primes.to_list()

    def test_matches_reference(self):
        """Test against the NumPy reference sieve."""
        for limit in [2, 3, 10, 97, 100, 101, 600, 1000]:
            primes = sieve_of_eratosthenes(limit)
            np.testing.assert_array_equal(np.array(primes.to_list()), reference_primes(limit))

    def test_bound_is_inclusive(self):
        """Test that a prime bound is included."""
        assert sieve_of_eratosthenes(97)[-1] == 97
        assert sieve_of_eratosthenes(96)[-1] == 89

    def test_small_and_negative_bounds(self):
        """Test that bounds below 2 give nothing."""
        for limit in [1, 0, -5]:
            consumer = []
            primes = sieve_of_eratosthenes(limit, sink=consumer.append)
            assert len(primes) == 0
            assert consumer == []

    def test_two_is_always_first(self):
        """Test the smallest bound."""
        consumer = []
        primes = sieve_of_eratosthenes(2, sink=consumer.append)
        assert primes == [2]
        assert consumer == [2]

    def test_no_sink(self):
        """Test that the sink is optional."""
        assert len(sieve_of_eratosthenes(100, only_super=True)) == 25

    def test_idempotent(self):
        """Test that repeated runs give identical results."""
        first_primes, first_emitted = collect(600, FilterConfig(only_sexy=True))
        second_primes, second_emitted = collect(600, FilterConfig(only_sexy=True))

        assert first_primes == second_primes
        assert first_emitted == second_emitted

    def test_monotonic_in_bound(self):
        """Test that smaller bounds give an ordered prefix."""
        small = sieve_of_eratosthenes(100)
        large = sieve_of_eratosthenes(600)

        assert large[:len(small)] == small.to_list()
        assert all(p in large for p in small)


class TestFilters:
    """Tests for the super, happy and sexy filters."""

    def test_only_super(self):
        """Test super primes up to 30."""
        consumer = []
        sieve_of_eratosthenes(30, only_super=True, sink=consumer.append)
        assert consumer == [3, 5, 11, 17]

    def test_only_happy(self):
        """Test happy primes up to 50."""
        consumer = []
        sieve_of_eratosthenes(50, only_happy=True, sink=consumer.append)
        assert consumer == [7, 13, 19, 23, 31]

    def test_only_sexy_catches_up_partner(self):
        """Test that a skipped lower partner is emitted before its pair."""
        consumer = []
        sieve_of_eratosthenes(40, only_sexy=True, sink=consumer.append)
        # 11 pairs with 5 and arrives before 7 is caught up by 13.
        assert consumer == [5, 11, 7, 13, 17, 19, 23, 29, 31, 37]

    def test_super_happy_sexy_counts(self):
        """Test the number of filtered primes up to 600."""
        only_super = []
        primes = sieve_of_eratosthenes(600, True, False, False, only_super.append)
        assert len(primes) == 109
        assert len(only_super) == 29

        only_happy = []
        assert sieve_of_eratosthenes(600, False, True, False, only_happy.append) == primes
        assert len(only_happy) == 24

        only_sexy = []
        assert sieve_of_eratosthenes(600, False, False, True, only_sexy.append) == primes
        assert len(only_sexy) == 85

        expected_all = [p for p in only_super if p in only_happy and p in only_sexy]
        assert expected_all == [31, 109, 331, 367, 563]

    def test_combined_filters_keep_all_primes(self):
        """Test that combining every filter still returns every prime."""
        primes = sieve_of_eratosthenes(600)
        assert sieve_of_eratosthenes(600, True, True, True, lambda p: None) == primes

    def test_sieve_with_config(self):
        """Test the FilterConfig wrapper."""
        consumer = []
        primes = sieve(600, FilterConfig(only_happy=True), consumer.append)
        assert len(primes) == 109
        assert len(consumer) == 24

    def test_sieve_default_config(self):
        """Test that no config accepts every prime."""
        primes, emitted = collect(100)
        assert len(primes) == 25
        assert emitted == primes.to_list()
