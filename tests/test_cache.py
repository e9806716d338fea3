"""Tests for the sieve cache."""

import numpy as np
import pytest

from schouten.core.cache import SieveCache
from schouten.core.sieve import sieve_primes


class TestSieveCache:
    """Tests for SieveCache class."""

    def test_basic_creation(self):
        """Test default construction."""
        cache = SieveCache()
        assert cache.maxsize == 128
        assert cache.enabled
        assert len(cache) == 0

    def test_invalid_maxsize(self):
        """Test negative maxsize raises error."""
        with pytest.raises(ValueError):
            SieveCache(maxsize=-1)

    def test_put_freezes(self):
        """Test stored arrays become read-only."""
        cache = SieveCache()
        primes = cache.put(50, sieve_primes(50))
        assert not primes.flags.writeable
        assert 50 in cache

    def test_get_exact(self):
        """Test exact-bound lookup."""
        cache = SieveCache()
        cache.put(30, sieve_primes(30))
        assert cache.get(30) is not None
        assert cache.get(31) is None

    def test_get_covering_slices(self):
        """Test a covering entry is sliced to the requested bound."""
        cache = SieveCache()
        cache.put(100, sieve_primes(100))
        np.testing.assert_array_equal(cache.get_covering(20), sieve_primes(20))
        np.testing.assert_array_equal(cache.get_covering(97), sieve_primes(97))
        assert cache.get_covering(101) is None

    def test_get_covering_uses_smallest(self):
        """Test the smallest covering entry is used and marked recent."""
        cache = SieveCache(maxsize=2)
        cache.put(50, sieve_primes(50))
        cache.put(1000, sieve_primes(1000))
        cache.get_covering(40)
        cache.put(60, sieve_primes(60))
        assert 50 in cache
        assert 1000 not in cache

    def test_lru_eviction(self):
        """Test least recently used entries are evicted first."""
        cache = SieveCache(maxsize=2)
        cache.put(10, sieve_primes(10))
        cache.put(20, sieve_primes(20))
        cache.get(10)
        cache.put(30, sieve_primes(30))
        assert 10 in cache
        assert 20 not in cache
        assert 30 in cache
        assert len(cache) == 2

    def test_disabled(self):
        """Test maxsize=0 never stores."""
        cache = SieveCache(maxsize=0)
        assert not cache.enabled
        primes = cache.get_or_compute(100, sieve_primes)
        assert len(primes) == 25
        assert len(cache) == 0
        cache.get_or_compute(100, sieve_primes)
        assert cache.misses == 2
        assert cache.hits == 0

    def test_unbounded(self):
        """Test maxsize=None keeps every entry."""
        cache = SieveCache(maxsize=None)
        for bound in range(2, 300):
            cache.put(bound, sieve_primes(bound))
        assert len(cache) == 298

    def test_get_or_compute_counts(self):
        """Test hit and miss counters."""
        calls = []

        def compute(bound):
            calls.append(bound)
            return sieve_primes(bound)

        cache = SieveCache()
        cache.get_or_compute(200, compute)
        cache.get_or_compute(200, compute)
        cache.get_or_compute(150, compute)
        assert calls == [200]
        assert cache.hits == 2
        assert cache.misses == 1

    def test_clear(self):
        """Test clear drops entries and counters."""
        cache = SieveCache()
        cache.get_or_compute(100, sieve_primes)
        cache.clear()
        assert len(cache) == 0
        assert cache.misses == 0
