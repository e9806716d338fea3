"""Human-readable explanations of engine results.

The engine returns bare values; these helpers turn them into the formula
strings shown by the CLI's --explain mode.
"""

from __future__ import annotations

from typing import Sequence

from schouten.core.engine import GapRecord, SpiralPoint

FORMULAS = {
    "next_prime": r"\text{next\_prime}(k) = k + d_n(k), \quad d_n(k) = \min\{m \in \mathbb{N} \mid k+m \in \mathbb{P}\}",
    "gap": r"d_n = p_{n+1} - p_n = 1 + C(p_n)",
    "prime_counting": r"\pi(k) = k - 1 - C(k) \quad \text{where } C(k) = \text{composite count}",
    "nth_prime": r"p_n = \pi^{-1}(n)",
    "primorial": r"p\# = \prod_{i=1}^{\pi(p)} p_i",
    "survivor": r"k \bmod p\# \in R_{p\#} \iff \gcd(k, p\#) = 1",
    "spiral": r"\vec{P}(n) = (\log p_n \cos \theta_n, \log p_n \sin \theta_n, n), \quad \theta_n = \arctan\frac{n}{\log p_n}",
}

DESCRIPTIONS = {
    "next_prime": "Finds the next prime by adding the minimal gap d_n(k) to k",
    "gap": "The gap between consecutive primes is one more than the composites between them",
    "prime_counting": "Counts primes as the integers 2..k minus the composites among them",
    "nth_prime": "Inverse of the prime counting function",
    "primorial": "Product of all primes up to and including p",
    "survivor": "Numbers coprime to the primorial p# are the prime candidates",
    "spiral": "Maps the nth prime onto a cone using logarithmic polar coordinates",
}


def ordinal_suffix(n: int) -> str:
    """English ordinal suffix: 1 -> 'st', 12 -> 'th', 23 -> 'rd'."""
    last = n % 10
    last_two = n % 100
    if last == 1 and last_two != 11:
        return "st"
    if last == 2 and last_two != 12:
        return "nd"
    if last == 3 and last_two != 13:
        return "rd"
    return "th"


def format_number(n: int) -> str:
    """Integer with thousands separators."""
    return f"{n:,}"


def format_next_prime(k: int, next_p: int) -> str:
    return f"next_prime({k}) = {k} + {next_p - k} = {next_p}"


def format_gap(record: GapRecord) -> str:
    return (
        f"gap({record.current_prime}) = {record.next_prime} - "
        f"{record.current_prime} = {record.gap}"
    )


def format_gap_law(record: GapRecord) -> str:
    return f"gap = 1 + composites_between = 1 + {record.composites_between} = {record.gap}"


def format_prime_count(k: int, count: int, composites: int) -> str:
    if k < 2:
        return f"π({k}) = 0 (no primes less than 2)"
    return f"π({k}) = {k} - 1 - {composites} = {count}"


def format_prime_list(primes: Sequence[int], limit: int = 20) -> str:
    """Comma-separated primes, truncated with '...' past `limit` entries."""
    shown = ", ".join(str(p) for p in primes[:limit])
    if len(primes) > limit:
        shown += "..."
    return shown


def format_nth_prime(n: int, prime: int) -> str:
    return f"p_{n} = {prime} (the {n}{ordinal_suffix(n)} prime number)"


def format_primorial(p: int, value: int) -> str:
    return f"{p}# = {format_number(value)}"


def format_survivor(k: int, p: int, passed: bool) -> str:
    verdict = "passes" if passed else "fails"
    return f"{k} {verdict} survivor criterion for {p}#"


def format_spiral_point(n: int, point: SpiralPoint) -> str:
    return (
        f"P({n}) = ({point.x:.3f}, {point.y:.3f}, {point.z}), "
        f"prime = {point.prime}"
    )
