"""schouten - elementary prime number engine and conical prime spiral."""

__version__ = "0.1.0"

from schouten.core.engine import (
    GapRecord,
    PrimeEngine,
    SpiralPoint,
    calculate_theta,
    count_composites,
    gap,
    gcd,
    get_engine,
    is_prime,
    next_prime,
    nth_prime,
    prime_counting_function,
    primorial,
    sieve_up_to,
    spiral_point,
    survivor_criterion,
)
from schouten.core.errors import InvalidArgumentError, NonPositiveError, NotPrimeError

__all__ = [
    "PrimeEngine",
    "GapRecord",
    "SpiralPoint",
    "get_engine",
    "is_prime",
    "sieve_up_to",
    "next_prime",
    "gap",
    "count_composites",
    "prime_counting_function",
    "nth_prime",
    "primorial",
    "gcd",
    "survivor_criterion",
    "calculate_theta",
    "spiral_point",
    "InvalidArgumentError",
    "NonPositiveError",
    "NotPrimeError",
]
