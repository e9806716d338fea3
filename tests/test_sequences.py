"""Tests for derived prime sequences."""

import pytest

from schouten.analysis.sequences import (
    MersenneCandidate,
    all_gaps,
    cousin_primes,
    goldbach_pair,
    mersenne_candidates,
    prime_density,
    sophie_germain_primes,
    twin_primes,
    wilson_test,
)
from schouten.core.sieve import is_prime


class TestAllGaps:
    """Tests for all_gaps function."""

    def test_gaps_up_to_30(self, engine):
        """Test gaps between primes up to 30."""
        gaps = all_gaps(30, engine=engine)
        assert [g.gap for g in gaps] == [1, 2, 2, 4, 2, 4, 2, 4, 6]
        assert gaps[0].current_prime == 2
        assert gaps[-1].next_prime == 29

    def test_gap_law(self, engine):
        """Test every record satisfies gap == 1 + composites_between."""
        for record in all_gaps(1000, engine=engine):
            assert record.gap == record.next_prime - record.current_prime
            assert record.gap == 1 + record.composites_between

    def test_matches_engine_gap(self, engine):
        """Test records agree with PrimeEngine.gap_record."""
        for record in all_gaps(200, engine=engine):
            assert record == engine.gap_record(record.current_prime)

    def test_too_small(self, engine):
        """Test bounds with fewer than two primes."""
        assert all_gaps(2, engine=engine) == []
        assert all_gaps(1, engine=engine) == []


class TestPrimePairs:
    """Tests for twin and cousin primes."""

    def test_twin_primes(self, engine):
        """Test twin primes up to 50."""
        assert twin_primes(50, engine=engine) == [
            (3, 5), (5, 7), (11, 13), (17, 19), (29, 31), (41, 43),
        ]

    def test_twin_bound_inclusive(self, engine):
        """Test the upper member must be <= up_to."""
        assert (41, 43) not in twin_primes(42, engine=engine)

    def test_cousin_primes(self, engine):
        """Test cousin primes up to 50."""
        assert cousin_primes(50, engine=engine) == [
            (3, 7), (7, 11), (13, 17), (19, 23), (37, 41), (43, 47),
        ]


class TestSophieGermain:
    """Tests for sophie_germain_primes function."""

    def test_up_to_100(self, engine):
        """Test Sophie Germain primes with 2p + 1 <= 100."""
        assert sophie_germain_primes(100, engine=engine) == [2, 3, 5, 11, 23, 29, 41]


class TestMersenne:
    """Tests for mersenne_candidates function."""

    def test_small_exponents(self, engine):
        """Test exponents up to 13."""
        candidates = mersenne_candidates(13, engine=engine)
        assert [c.exponent for c in candidates] == [2, 3, 5, 7, 11, 13]
        assert candidates[4] == MersenneCandidate(exponent=11, value=2047, is_prime=False)
        assert [c.is_prime for c in candidates] == [True, True, True, True, False, True]

    def test_exponent_cap(self, engine):
        """Test exponents stop at 31."""
        candidates = mersenne_candidates(100, engine=engine)
        assert candidates[-1].exponent == 31
        assert candidates[-1].is_prime


class TestGoldbach:
    """Tests for goldbach_pair function."""

    def test_known_pairs(self, engine):
        """Test smallest decompositions."""
        assert goldbach_pair(4, engine=engine) == (2, 2)
        assert goldbach_pair(28, engine=engine) == (5, 23)
        assert goldbach_pair(100, engine=engine) == (3, 97)

    def test_even_numbers(self, engine):
        """Test every even n in range decomposes."""
        for n in range(4, 500, 2):
            p, q = goldbach_pair(n, engine=engine)
            assert p + q == n
            assert p <= q
            assert is_prime(p) and is_prime(q)

    def test_invalid(self, engine):
        """Test odd and small inputs give None."""
        assert goldbach_pair(7, engine=engine) is None
        assert goldbach_pair(2, engine=engine) is None
        assert goldbach_pair(0, engine=engine) is None


class TestPrimeDensity:
    """Tests for prime_density function."""

    def test_density_at_100(self, engine):
        """Test primes in [2, 200] per 200 integers."""
        assert prime_density(100, window=100, engine=engine) == pytest.approx(46 / 200)

    def test_window(self, engine):
        """Test a narrow window."""
        # primes in [90, 110]: 97, 101, 103, 107, 109
        assert prime_density(100, window=10, engine=engine) == pytest.approx(5 / 20)

    def test_invalid_window(self, engine):
        """Test non-positive window raises error."""
        with pytest.raises(ValueError):
            prime_density(100, window=0, engine=engine)


class TestWilson:
    """Tests for wilson_test function."""

    def test_agrees_with_trial_division(self):
        """Test Wilson's theorem against is_prime."""
        for n in range(-2, 300):
            assert wilson_test(n) == is_prime(n), n
