"""Command-line interface for schouten."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from schouten import formatting
from schouten.config import EngineConfig, load_config
from schouten.core.engine import PrimeEngine
from schouten.core.errors import InvalidArgumentError
from schouten.utils.logging import setup_logger

logger = logging.getLogger("schouten")


def cmd_is_prime(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """Test a single integer for primality."""
    result = engine.is_prime(args.k)
    if args.explain:
        print(f"{args.k} is {'prime' if result else 'not prime'}")
    else:
        print(result)
    return 0


def cmd_next_prime(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """Find the least prime greater than k."""
    result = engine.next_prime(args.k)
    if args.explain:
        print(formatting.format_next_prime(args.k, result))
        print(formatting.DESCRIPTIONS["next_prime"])
    else:
        print(result)
    return 0


def cmd_gap(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """Gap from a prime to its successor."""
    if args.explain:
        record = engine.gap_record(args.p)
        print(formatting.format_gap(record))
        print(formatting.format_gap_law(record))
    else:
        print(engine.gap(args.p))
    return 0


def cmd_count(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """Prime counting function pi(k)."""
    count = engine.prime_counting_function(args.k)
    if args.explain:
        composites = engine.count_composites(args.k)
        print(formatting.format_prime_count(args.k, count, composites))
        primes = engine.sieve_up_to(args.k).tolist()
        if primes:
            print(f"Primes found: {formatting.format_prime_list(primes)}")
    else:
        print(count)
    return 0


def cmd_nth(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """Inverse prime counting: the nth prime."""
    prime = engine.nth_prime(args.n)
    if args.explain:
        print(formatting.format_nth_prime(args.n, prime))
    else:
        print(prime)
    return 0


def cmd_primorial(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """Product of all primes <= p."""
    value = engine.primorial(args.p)
    if args.explain:
        print(formatting.format_primorial(args.p, value))
    else:
        print(value)
    return 0


def cmd_survivor(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """Check whether k survives the sieve by primes <= p."""
    passed = engine.survivor_criterion(args.k, args.p)
    if args.explain:
        print(formatting.format_survivor(args.k, args.p, passed))
    else:
        print(passed)
    return 0


def cmd_sieve(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """List all primes <= n."""
    primes = engine.sieve_up_to(args.n).tolist()
    if args.explain:
        print(f"{len(primes)} primes <= {args.n}: {formatting.format_prime_list(primes, limit=len(primes))}")
    else:
        print(" ".join(str(p) for p in primes))
    return 0


def cmd_spiral(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """Generate conical spiral points, optionally rendering them."""
    from tqdm import tqdm

    count = args.count if args.count is not None else engine.config.spiral_count
    if count < 1:
        raise InvalidArgumentError(f"count must be >= 1, got {count}")
    dpi = args.dpi if args.dpi is not None else engine.config.figure_dpi
    if dpi < 1:
        raise InvalidArgumentError(f"dpi must be >= 1, got {dpi}")

    logger.debug(f"Generating conical spiral: count={count}")

    # One sieve up front; each spiral_point below is then served from the cache.
    engine.first_primes(count)
    points = [
        engine.spiral_point(n)
        for n in tqdm(range(1, count + 1), desc="Generating spiral points", disable=not args.output)
    ]

    if args.output:
        from schouten.visualization.renderer import render_point_cloud, save_figure

        fig = render_point_cloud(points, title=f"Conical prime spiral ({count} primes)")
        save_figure(fig, Path(args.output), dpi=dpi)
    else:
        for n, point in enumerate(points, start=1):
            print(formatting.format_spiral_point(n, point))
    return 0


def cmd_validate(engine: PrimeEngine, args: argparse.Namespace) -> int:
    """Run the self-check suite."""
    from schouten.validation import cross_validate_with_references, run_all_checks, summarize

    results = run_all_checks(engine)
    references_ok = cross_validate_with_references(engine)
    summary = summarize(results)

    return 0 if references_ok and summary["passed"] == summary["total"] else 1


def build_config(args: argparse.Namespace) -> EngineConfig:
    """Config file values, overridden by command-line flags."""
    config = load_config(args.config) if args.config else EngineConfig()
    if args.cache_size is not None:
        config = EngineConfig.from_dict({**config.to_dict(), "cache_size": args.cache_size})
    return config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schouten",
        description="Elementary prime number calculations and the conical prime spiral",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", default=None, help="JSON config file")
    parser.add_argument("--cache-size", type=int, default=None,
                        help="Sieve cache entries (0 disables caching)")
    parser.add_argument("--explain", action="store_true", help="Show the formula behind each result")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    p = subparsers.add_parser("is-prime", help="Test primality")
    p.add_argument("k", type=int, help="Integer to test")

    p = subparsers.add_parser("next-prime", help="Least prime greater than k")
    p.add_argument("k", type=int, help="Starting integer")

    p = subparsers.add_parser("gap", help="Gap from a prime to the next prime")
    p.add_argument("p", type=int, help="A prime")

    p = subparsers.add_parser("count", help="Prime counting function pi(k)")
    p.add_argument("k", type=int, help="Upper bound")

    p = subparsers.add_parser("nth", help="The nth prime")
    p.add_argument("n", type=int, help="Index (1 = first prime)")

    p = subparsers.add_parser("primorial", help="Primorial p#")
    p.add_argument("p", type=int, help="A prime")

    p = subparsers.add_parser("survivor", help="Survivor criterion k mod p#")
    p.add_argument("k", type=int, help="Integer to filter")
    p.add_argument("p", type=int, help="A prime")

    p = subparsers.add_parser("sieve", help="All primes up to n")
    p.add_argument("n", type=int, help="Upper bound")

    p = subparsers.add_parser("spiral", help="Conical prime spiral points")
    p.add_argument("--count", type=int, default=None, help="Number of points")
    p.add_argument("--output", "-o", default=None, help="Render to this image file")
    p.add_argument("--dpi", type=int, default=None, help="Image resolution")

    subparsers.add_parser("validate", help="Run the self-check suite")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logger("schouten", logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    commands = {
        "is-prime": cmd_is_prime,
        "next-prime": cmd_next_prime,
        "gap": cmd_gap,
        "count": cmd_count,
        "nth": cmd_nth,
        "primorial": cmd_primorial,
        "survivor": cmd_survivor,
        "sieve": cmd_sieve,
        "spiral": cmd_spiral,
        "validate": cmd_validate,
    }

    try:
        engine = PrimeEngine(config=build_config(args))
        return commands[args.command](engine, args)
    except (ValueError, OSError) as e:
        # Engine argument errors, bad config values, unreadable config files
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
