"""Derived prime sequences and statistics."""

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

__all__ = [
    "MersenneCandidate",
    "all_gaps",
    "cousin_primes",
    "goldbach_pair",
    "mersenne_candidates",
    "prime_density",
    "sophie_germain_primes",
    "twin_primes",
    "wilson_test",
]
