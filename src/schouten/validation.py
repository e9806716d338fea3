"""Self-check of the engine against known number-theory results.

Runs each engine operation on inputs with literal reference answers and
reports pass/fail per category, plus a timing pass for the heavier calls.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from schouten.core.engine import PrimeEngine, get_engine
from schouten.core.errors import InvalidArgumentError

_default_logger = logging.getLogger(__name__)

# The first 25 primes, i.e. every prime below 100.
REFERENCE_PRIMES = [
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41,
    43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97,
]

NEXT_PRIME_CASES = [(2, 3), (10, 11), (13, 17), (100, 101), (997, 1009)]
GAP_CASES = [(2, 1), (3, 2), (7, 4), (23, 6), (89, 8)]
PRIME_COUNT_CASES = [(10, 4), (20, 8), (50, 15), (100, 25), (200, 46)]
PRIMORIAL_CASES = [(2, 2), (3, 6), (5, 30), (7, 210), (11, 2310)]
SPIRAL_CASES = [1, 2, 3, 5, 10]

# A timing check passes when it completes in under this many seconds.
PERFORMANCE_LIMIT = 1.0


@dataclass
class CheckResult:
    """Outcome of a single check."""
    category: str
    name: str
    expected: Any = None
    actual: Any = None
    passed: bool = False
    error: Optional[str] = None
    duration: float = 0.0


def _run_check(
    logger: logging.Logger,
    category: str,
    name: str,
    expected: Any,
    func: Callable[[], Any],
    compare: Optional[Callable[[Any, Any], bool]] = None,
) -> CheckResult:
    compare = compare or (lambda actual, exp: actual == exp)
    start = time.perf_counter()
    try:
        actual = func()
    except InvalidArgumentError as e:
        duration = time.perf_counter() - start
        logger.info(f"FAIL {name}: error - {e}")
        return CheckResult(category, name, expected, None, False, str(e), duration)
    duration = time.perf_counter() - start

    passed = compare(actual, expected)
    if passed:
        logger.info(f"PASS {name} = {actual}")
    else:
        logger.info(f"FAIL {name}: expected {expected}, got {actual}")
    return CheckResult(category, name, expected, actual, passed, None, duration)


def check_next_prime(
    engine: PrimeEngine,
    logger: Optional[logging.Logger] = None,
) -> List[CheckResult]:
    logger = logger or _default_logger
    logger.info("Testing next prime function...")
    return [
        _run_check(logger, "next_prime", f"next_prime({k})", expected, lambda k=k: engine.next_prime(k))
        for k, expected in NEXT_PRIME_CASES
    ]


def check_gap_law(
    engine: PrimeEngine,
    logger: Optional[logging.Logger] = None,
) -> List[CheckResult]:
    """Gap values, and that each gap is one more than the composites it spans."""
    logger = logger or _default_logger
    logger.info("Testing gap law...")

    def gap_law_holds(record, expected):
        return record.gap == expected and record.gap == 1 + record.composites_between

    return [
        _run_check(
            logger,
            "gap_law",
            f"gap({p})",
            expected,
            lambda p=p: engine.gap_record(p),
            compare=gap_law_holds,
        )
        for p, expected in GAP_CASES
    ]


def check_prime_counting(
    engine: PrimeEngine,
    logger: Optional[logging.Logger] = None,
) -> List[CheckResult]:
    logger = logger or _default_logger
    logger.info("Testing prime counting function...")
    return [
        _run_check(logger, "prime_counting", f"pi({k})", expected,
                   lambda k=k: engine.prime_counting_function(k))
        for k, expected in PRIME_COUNT_CASES
    ]


def check_primorial(
    engine: PrimeEngine,
    logger: Optional[logging.Logger] = None,
) -> List[CheckResult]:
    logger = logger or _default_logger
    logger.info("Testing primorial calculation...")
    return [
        _run_check(logger, "primorial", f"{p}#", expected, lambda p=p: engine.primorial(p))
        for p, expected in PRIMORIAL_CASES
    ]


def check_spiral(
    engine: PrimeEngine,
    logger: Optional[logging.Logger] = None,
) -> List[CheckResult]:
    """Spiral points carry the nth prime, sit at height n and are finite."""
    logger = logger or _default_logger
    logger.info("Testing spiral formula...")

    def well_formed(point, n):
        return (
            point.z == n
            and point.prime == engine.nth_prime(n)
            and math.isfinite(point.x)
            and math.isfinite(point.y)
        )

    return [
        _run_check(logger, "spiral", f"spiral_point({n})", n,
                   lambda n=n: engine.spiral_point(n), compare=well_formed)
        for n in SPIRAL_CASES
    ]


def check_performance(
    engine: PrimeEngine,
    logger: Optional[logging.Logger] = None,
) -> List[CheckResult]:
    logger = logger or _default_logger
    logger.info("Testing performance...")
    timings = [
        ("next_prime(1000)", lambda: engine.next_prime(1000)),
        ("pi(1000)", lambda: engine.prime_counting_function(1000)),
        ("nth_prime(100)", lambda: engine.nth_prime(100)),
        ("primorial(13)", lambda: engine.primorial(13)),
        ("spiral_points(50)", lambda: len(engine.spiral_points(50))),
    ]

    results = []
    for name, func in timings:
        result = _run_check(logger, "performance", name, None, func, compare=lambda a, e: True)
        result.passed = result.error is None and result.duration < PERFORMANCE_LIMIT
        logger.info(f"  {name}: {result.duration * 1000:.2f}ms")
        results.append(result)
    return results


def run_all_checks(
    engine: Optional[PrimeEngine] = None,
    logger: Optional[logging.Logger] = None,
) -> Dict[str, List[CheckResult]]:
    """Run every check category.

    Args:
        engine: Engine under test. Defaults to the shared engine.
        logger: Logger for progress and results. Defaults to this module's logger.

    Returns:
        Mapping of category name to its check results.
    """
    engine = engine if engine is not None else get_engine()
    logger = logger or _default_logger

    results = {
        "next_prime": check_next_prime(engine, logger),
        "gap_law": check_gap_law(engine, logger),
        "prime_counting": check_prime_counting(engine, logger),
        "primorial": check_primorial(engine, logger),
        "spiral": check_spiral(engine, logger),
        "performance": check_performance(engine, logger),
    }

    log_summary(results, logger)
    return results


def cross_validate_with_references(
    engine: Optional[PrimeEngine] = None,
    logger: Optional[logging.Logger] = None,
) -> bool:
    """Check nth_prime(1..25) against the literal first 25 primes."""
    engine = engine if engine is not None else get_engine()
    logger = logger or _default_logger

    for n, reference in enumerate(REFERENCE_PRIMES, start=1):
        calculated = engine.nth_prime(n)
        if calculated != reference:
            logger.warning(f"{n}th prime: calculated {calculated}, reference {reference}")
            return False

    logger.info(f"All first {len(REFERENCE_PRIMES)} primes match references")
    return True


def summarize(results: Dict[str, List[CheckResult]]) -> Dict[str, Any]:
    """Pass counts per category and overall.

    Returns:
        Dict with 'categories' (name -> (passed, total)), 'passed',
        'total' and 'percentage'.
    """
    categories = {
        name: (sum(1 for r in checks if r.passed), len(checks))
        for name, checks in results.items()
    }
    passed = sum(p for p, _ in categories.values())
    total = sum(t for _, t in categories.values())

    return {
        "categories": categories,
        "passed": passed,
        "total": total,
        "percentage": (passed / total * 100) if total else 0.0,
    }


def log_summary(
    results: Dict[str, List[CheckResult]],
    logger: Optional[logging.Logger] = None,
) -> None:
    logger = logger or _default_logger
    summary = summarize(results)

    logger.info("")
    logger.info("Test Results Summary:")
    logger.info("=" * 24)
    for name, (passed, total) in summary["categories"].items():
        logger.info(f"{name}: {passed}/{total} ({passed / total * 100:.1f}%)")

    logger.info(
        f"Overall: {summary['passed']}/{summary['total']} "
        f"({summary['percentage']:.1f}%) checks passed"
    )
