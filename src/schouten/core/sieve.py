"""Stateless prime primitives: trial division, sieving and gcd.

These are the direct textbook restatements the engine is built from.
`is_prime` is the correctness oracle; the sieve is the bulk-generation
path; `generate_primes` is the slow incremental generator kept as a
cross-check for the sieve.
"""

from __future__ import annotations

import math

import numpy as np


def is_prime(n: int) -> bool:
    """Check if a single number is prime.

    Removes the even case, then tries odd divisors up to sqrt(n).

    Args:
        n: Number to check.

    Returns:
        True if n is prime, False otherwise (including every n < 2).
    """
    n = int(n)
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2

    return True


def sieve_mask(limit: int) -> np.ndarray:
    """Sieve of Eratosthenes as a boolean mask.

    Args:
        limit: Largest integer covered (inclusive).

    Returns:
        Boolean array of length limit + 1 where mask[i] is True iff i is
        prime. Empty when limit < 0.
    """
    if limit < 0:
        return np.zeros(0, dtype=bool)

    mask = np.ones(limit + 1, dtype=bool)
    mask[:2] = False

    for i in range(2, math.isqrt(limit) + 1):
        if mask[i]:
            mask[i*i::i] = False

    return mask


def sieve_primes(limit: int) -> np.ndarray:
    """Generate all primes up to and including limit (uncached).

    Args:
        limit: Upper bound for prime generation (inclusive).

    Returns:
        Ascending int64 array of primes; empty when limit < 2.
    """
    if limit < 2:
        return np.array([], dtype=np.int64)

    return np.nonzero(sieve_mask(limit))[0].astype(np.int64)


def generate_primes(count: int) -> np.ndarray:
    """Generate the first `count` primes by testing successive integers.

    Much slower than the sieve but independent of it.

    Args:
        count: Number of primes to generate.

    Returns:
        Ascending int64 array of length count.
    """
    primes = []
    candidate = 2

    while len(primes) < count:
        if is_prime(candidate):
            primes.append(candidate)
        candidate += 1

    return np.array(primes, dtype=np.int64)


def estimate_upper_bound(n: int) -> int:
    """Upper bound guess for the nth prime from the prime number theorem.

    For n >= 6, p_n < n (ln n + ln ln n); the extra slack and the floor of
    100 keep small n safe.
    """
    return max(100, int(n * (np.log(n) + np.log(np.log(n + 1)) + 2)))


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm on absolute values.

    Works on Python ints of any size; gcd(a, 0) == |a|.
    """
    a, b = abs(int(a)), abs(int(b))
    while b != 0:
        a, b = b, a % b
    return a
