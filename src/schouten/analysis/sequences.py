"""Sequences derived from sieved primes.

Gap tables, prime pairs, Sophie Germain and Mersenne candidates, Goldbach
decompositions and local prime density. All helpers take an optional
engine and fall back to the default one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from schouten.core.engine import GapRecord, PrimeEngine, get_engine
from schouten.core.sieve import is_prime

# 2**31 - 1 is the largest Mersenne number we trial-divide.
MAX_MERSENNE_EXPONENT = 31


@dataclass(frozen=True)
class MersenneCandidate:
    """2**exponent - 1 for a prime exponent."""
    exponent: int
    value: int
    is_prime: bool


def _engine(engine: Optional[PrimeEngine]) -> PrimeEngine:
    return engine if engine is not None else get_engine()


def all_gaps(up_to: int, engine: Optional[PrimeEngine] = None) -> List[GapRecord]:
    """Gap records for each pair of consecutive primes <= up_to.

    Args:
        up_to: Sieve bound (inclusive).
        engine: Engine to sieve with.

    Returns:
        One GapRecord per consecutive pair, ascending.
    """
    primes = _engine(engine).sieve_up_to(up_to)
    gaps = np.diff(primes)

    return [
        GapRecord(
            current_prime=int(p),
            next_prime=int(q),
            gap=int(g),
            composites_between=int(g) - 1,
        )
        for p, q, g in zip(primes[:-1], primes[1:], gaps)
    ]


def _prime_pairs(up_to: int, distance: int, engine: Optional[PrimeEngine]) -> List[Tuple[int, int]]:
    primes = _engine(engine).sieve_up_to(up_to)
    prime_set = set(primes.tolist())
    return [(p, p + distance) for p in primes.tolist() if p + distance in prime_set]


def twin_primes(up_to: int, engine: Optional[PrimeEngine] = None) -> List[Tuple[int, int]]:
    """Pairs (p, p + 2) of primes with p + 2 <= up_to."""
    return _prime_pairs(up_to, 2, engine)


def cousin_primes(up_to: int, engine: Optional[PrimeEngine] = None) -> List[Tuple[int, int]]:
    """Pairs (p, p + 4) of primes with p + 4 <= up_to."""
    return _prime_pairs(up_to, 4, engine)


def sophie_germain_primes(up_to: int, engine: Optional[PrimeEngine] = None) -> List[int]:
    """Primes p for which 2p + 1 is also prime and 2p + 1 <= up_to."""
    primes = _engine(engine).sieve_up_to(up_to)
    prime_set = set(primes.tolist())
    return [p for p in primes.tolist() if 2 * p + 1 in prime_set]


def mersenne_candidates(
    max_exponent: int,
    engine: Optional[PrimeEngine] = None,
) -> List[MersenneCandidate]:
    """Mersenne numbers 2**p - 1 for prime p <= max_exponent.

    Exponents are capped at MAX_MERSENNE_EXPONENT since primality is
    checked by trial division.
    """
    exponents = _engine(engine).sieve_up_to(min(max_exponent, MAX_MERSENNE_EXPONENT))

    candidates = []
    for p in exponents.tolist():
        value = 2 ** p - 1
        candidates.append(MersenneCandidate(exponent=p, value=value, is_prime=is_prime(value)))
    return candidates


def goldbach_pair(n: int, engine: Optional[PrimeEngine] = None) -> Optional[Tuple[int, int]]:
    """Decompose an even n > 2 into two primes p <= q with p as small as possible.

    Returns:
        (p, q) with p + q == n, or None when n is odd or n <= 2.
    """
    if n % 2 != 0 or n <= 2:
        return None

    for p in _engine(engine).sieve_up_to(n).tolist():
        complement = n - p
        if complement < p:
            break
        if is_prime(complement):
            return (p, complement)

    return None


def prime_density(n: int, window: int = 100, engine: Optional[PrimeEngine] = None) -> float:
    """Fraction of primes in [max(2, n - window), n + window], per 2 * window integers.

    Raises:
        ValueError: If window < 1.
    """
    if window < 1:
        raise ValueError(f"window must be >= 1, got {window}")

    start = max(2, n - window)
    primes = _engine(engine).sieve_up_to(n + window)
    count = len(primes) - int(np.searchsorted(primes, start, side="left"))
    return count / (2 * window)


def wilson_test(n: int) -> bool:
    """Primality by Wilson's theorem: (n - 1)! == -1 (mod n) iff n is prime.

    The factorial is only reduced for n < 100; larger n fall back to
    trial division.
    """
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    if n < 100:
        factorial = 1
        for i in range(1, n):
            factorial = (factorial * i) % n
        return factorial == n - 1

    return is_prime(n)
