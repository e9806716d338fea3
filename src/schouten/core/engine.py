"""The prime engine: elementary number-theory quantities over integers.

Every operation is a pure function of its inputs. The only state an engine
holds is an optional sieve cache, which never changes observable results.
Operations return bare values; human-readable explanations live in
`schouten.formatting`.

Conventions:
    - 0 and 1 are neither prime nor composite.
    - Primorials and survivor residues are Python ints (unbounded).
    - Prime sequences are read-only int64 numpy arrays.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from schouten.config import EngineConfig
from schouten.core import sieve
from schouten.core.cache import SieveCache, freeze
from schouten.core.errors import NonPositiveError, NotPrimeError


@dataclass(frozen=True)
class GapRecord:
    """A prime, its successor and the gap between them."""
    current_prime: int
    next_prime: int
    gap: int
    composites_between: int


@dataclass(frozen=True)
class SpiralPoint:
    """One point of the conical prime spiral; z is the prime's index."""
    x: float
    y: float
    z: int
    prime: int


class PrimeEngine:
    """Prime testing, generation, counting, primorials and the spiral map.

    Attributes:
        config: Engine configuration.
        cache: Sieve cache keyed by bound.
    """

    def __init__(
        self,
        cache: Optional[SieveCache] = None,
        config: Optional[EngineConfig] = None,
    ):
        """Initialize the engine.

        Args:
            cache: Cache to use. Built from config.cache_size when omitted.
            config: Engine configuration. Defaults to EngineConfig().
        """
        self.config = config or EngineConfig()
        self.cache = cache if cache is not None else SieveCache(self.config.cache_size)

    # Primality and generation

    @staticmethod
    def is_prime(n: int) -> bool:
        """Trial-division primality test; False for n < 2."""
        return sieve.is_prime(n)

    def sieve_up_to(self, n: int) -> np.ndarray:
        """All primes <= n, ascending, as a read-only int64 array.

        Args:
            n: Sieve bound (inclusive).

        Returns:
            Prime sequence; empty when n < 2.
        """
        n = int(n)
        if n < 2:
            return freeze(np.array([], dtype=np.int64))
        return self.cache.get_or_compute(n, sieve.sieve_primes)

    def first_primes(self, count: int) -> np.ndarray:
        """The first `count` primes, sieved with a growing bound.

        The bound starts at the prime number theorem estimate and grows
        by half until enough primes are found.
        """
        count = int(count)
        if count < 1:
            return freeze(np.array([], dtype=np.int64))

        bound = sieve.estimate_upper_bound(count)
        primes = self.sieve_up_to(bound)
        while len(primes) < count:
            bound = int(bound * 1.5)
            primes = self.sieve_up_to(bound)

        return primes[:count]

    def next_prime(self, k: int) -> int:
        """Least prime strictly greater than k (2 for every k < 2)."""
        k = int(k)
        if k < 2:
            return 2

        candidate = k + 1
        while not sieve.is_prime(candidate):
            candidate += 1
        return candidate

    # Gaps and counting

    def gap(self, p: int) -> int:
        """Distance from prime p to the next prime.

        Raises:
            NotPrimeError: If p is not prime.
        """
        if not sieve.is_prime(p):
            raise NotPrimeError(p)
        p = int(p)
        return self.next_prime(p) - p

    def gap_record(self, p: int) -> GapRecord:
        """Gap from prime p with the composites strictly between p and its successor.

        Raises:
            NotPrimeError: If p is not prime.
        """
        if not sieve.is_prime(p):
            raise NotPrimeError(p)
        p = int(p)
        q = self.next_prime(p)
        composites = sum(1 for i in range(p + 1, q) if not sieve.is_prime(i))
        return GapRecord(
            current_prime=p,
            next_prime=q,
            gap=q - p,
            composites_between=composites,
        )

    @staticmethod
    def count_composites(k: int) -> int:
        """Number of composites in [4, k]; 0 for k < 4.

        Counted directly with the trial-division test, independently of
        the sieve.
        """
        k = int(k)
        if k < 4:
            return 0
        return sum(1 for i in range(4, k + 1) if not sieve.is_prime(i))

    def prime_counting_function(self, k: int) -> int:
        """pi(k), the number of primes <= k.

        Uses pi(k) = k - 1 - C(k): the k - 1 integers in [2, k] are each
        either prime or composite, while 1 is neither.
        """
        k = int(k)
        if k < 2:
            return 0
        return k - 1 - self.count_composites(k)

    def nth_prime(self, n: int) -> int:
        """The nth prime, 1-indexed (nth_prime(1) == 2).

        Raises:
            NonPositiveError: If n < 1.
        """
        if n < 1:
            raise NonPositiveError(n)
        return int(self.first_primes(n)[n - 1])

    # Primorials and modular filtering

    def primorial(self, p: int) -> int:
        """p#, the product of all primes <= p, as an unbounded int.

        Raises:
            NotPrimeError: If p is not prime.
        """
        if not sieve.is_prime(p):
            raise NotPrimeError(p)
        return math.prod(int(q) for q in self.sieve_up_to(p))

    @staticmethod
    def gcd(a: int, b: int) -> int:
        """Euclid's gcd on absolute values."""
        return sieve.gcd(a, b)

    def survivor_criterion(self, k: int, p: int) -> bool:
        """True iff k mod p# is coprime to p#.

        Integers that fail have a prime factor <= p. Passing is necessary
        but not sufficient for primality.

        Raises:
            NotPrimeError: If p is not prime.
        """
        modulus = self.primorial(p)
        residue = int(k) % modulus
        return sieve.gcd(residue, modulus) == 1

    # Conical spiral

    @staticmethod
    def calculate_theta(n: int, p: int) -> float:
        """Spiral angle arctan(n / ln p)."""
        return math.atan(n / math.log(p))

    def spiral_point(self, n: int) -> SpiralPoint:
        """Embed the nth prime at (ln p cos t, ln p sin t, n).

        Raises:
            NonPositiveError: If n < 1.
        """
        return self._spiral_point(int(n), self.nth_prime(n))

    def spiral_points(self, count: int) -> List[SpiralPoint]:
        """Spiral points for n = 1..count, sieving once."""
        primes = self.first_primes(count)
        return [self._spiral_point(i + 1, int(p)) for i, p in enumerate(primes)]

    def _spiral_point(self, n: int, prime: int) -> SpiralPoint:
        radius = math.log(prime)
        theta = self.calculate_theta(n, prime)
        return SpiralPoint(
            x=radius * math.cos(theta),
            y=radius * math.sin(theta),
            z=n,
            prime=prime,
        )

    def clear_cache(self) -> None:
        """Drop all cached sieve results."""
        self.cache.clear()

    def __repr__(self) -> str:
        return f"PrimeEngine(cache={self.cache!r})"


# Convenience functions for quick access
_default_engine: Optional[PrimeEngine] = None


def get_engine() -> PrimeEngine:
    """Get the default engine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = PrimeEngine()
    return _default_engine


def set_engine(engine: Optional[PrimeEngine]) -> None:
    """Replace the default engine (None resets it on next access)."""
    global _default_engine
    _default_engine = engine


def is_prime(n: int) -> bool:
    return sieve.is_prime(n)


def sieve_up_to(n: int) -> np.ndarray:
    return get_engine().sieve_up_to(n)


def first_primes(count: int) -> np.ndarray:
    return get_engine().first_primes(count)


def next_prime(k: int) -> int:
    return get_engine().next_prime(k)


def gap(p: int) -> int:
    return get_engine().gap(p)


def gap_record(p: int) -> GapRecord:
    return get_engine().gap_record(p)


def count_composites(k: int) -> int:
    return PrimeEngine.count_composites(k)


def prime_counting_function(k: int) -> int:
    return get_engine().prime_counting_function(k)


def nth_prime(n: int) -> int:
    return get_engine().nth_prime(n)


def primorial(p: int) -> int:
    return get_engine().primorial(p)


def gcd(a: int, b: int) -> int:
    return sieve.gcd(a, b)


def survivor_criterion(k: int, p: int) -> bool:
    return get_engine().survivor_criterion(k, p)


def calculate_theta(n: int, p: int) -> float:
    return PrimeEngine.calculate_theta(n, p)


def spiral_point(n: int) -> SpiralPoint:
    return get_engine().spiral_point(n)


def spiral_points(count: int) -> List[SpiralPoint]:
    return get_engine().spiral_points(count)
