"""Core prime engine, sieve primitives and cache."""

from schouten.core.cache import SieveCache
from schouten.core.engine import (
    GapRecord,
    PrimeEngine,
    SpiralPoint,
    get_engine,
    set_engine,
)
from schouten.core.errors import InvalidArgumentError, NonPositiveError, NotPrimeError
from schouten.core.sieve import gcd, generate_primes, is_prime, sieve_primes

__all__ = [
    "PrimeEngine",
    "GapRecord",
    "SpiralPoint",
    "SieveCache",
    "get_engine",
    "set_engine",
    "InvalidArgumentError",
    "NonPositiveError",
    "NotPrimeError",
    "gcd",
    "generate_primes",
    "is_prime",
    "sieve_primes",
]
