"""Quick start example for schouten.

Run this script to exercise each engine operation and render a small
conical spiral.
"""

from pathlib import Path


def main():
    print("Schouten - Quick Start Demo")
    print("=" * 50)

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    from schouten import PrimeEngine, NotPrimeError
    from schouten import formatting

    engine = PrimeEngine()

    print("\n1. Next prime and gaps...")
    print(f"   {formatting.format_next_prime(10, engine.next_prime(10))}")
    record = engine.gap_record(89)
    print(f"   {formatting.format_gap(record)}")
    print(f"   {formatting.format_gap_law(record)}")

    print("\n2. Prime counting...")
    k = 100
    count = engine.prime_counting_function(k)
    print(f"   {formatting.format_prime_count(k, count, engine.count_composites(k))}")
    print(f"   {formatting.format_nth_prime(25, engine.nth_prime(25))}")

    print("\n3. Primorials and the survivor criterion...")
    for p in [2, 3, 5, 7, 11, 13, 29]:
        print(f"   {formatting.format_primorial(p, engine.primorial(p))}")
    for candidate in [31, 49, 35]:
        passed = engine.survivor_criterion(candidate, 5)
        print(f"   {formatting.format_survivor(candidate, 5, passed)}")

    try:
        engine.primorial(9)
    except NotPrimeError as e:
        print(f"   Error: {e}")

    print("\n4. Rendering conical spiral (200 primes)...")
    from schouten.visualization.conical import ConicalSpiral

    spiral = ConicalSpiral(200, engine=engine)
    path = spiral.save(output_dir / "conical_spiral.png")
    print(f"   Saved to {path}")

    print("\n" + "=" * 50)
    print("Quick start complete!")


if __name__ == "__main__":
    main()
