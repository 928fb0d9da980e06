"""Quick start example for prime_profile.

Run this script to see the sieve filters in action and test the installation.
"""

from pathlib import Path


def main():
    print("Prime Profile - Quick Start Demo")
    print("=" * 50)

    output_dir = Path("output")
    output_dir.mkdir(exist_ok=True)

    print("\n1. Sieving primes up to 600...")
    from prime_profile.core.sieve import collect

    primes, emitted = collect(600)
    print(f"   Found {len(primes)} primes")
    print(f"   First 10: {primes[:10]}")
    print(f"   Last 10: {primes[-10:]}")

    print("\n2. Filtering super, happy and sexy primes...")
    from prime_profile.config import FilterConfig

    by_filter = {}
    for name, config in [
        ("super", FilterConfig(only_super=True)),
        ("happy", FilterConfig(only_happy=True)),
        ("sexy", FilterConfig(only_sexy=True)),
    ]:
        _, by_filter[name] = collect(600, config)
        print(f"   {name:>5}: {len(by_filter[name])} primes")

    print("\n3. Sexy primes can arrive out of order...")
    print(f"   First 8 sexy emissions: {by_filter['sexy'][:8]}")

    print("\n4. Primes that are super, happy and sexy...")
    all_three = [p for p in by_filter["super"] if p in by_filter["happy"] and p in by_filter["sexy"]]
    print(f"   {all_three}")

    print("\n5. Timing a larger run and checking it...")
    from prime_profile.utils.report import run_report

    report = run_report(20_000, verify=True)
    print(f"   {report.prime_count:,} primes up to 20,000 in {report.elapsed_seconds:.3f}s")
    print(f"   Matches reference sieve: {report.verified}")

    path = report.save(output_dir / "quickstart_report.json")
    print(f"   Saved to {path}")

    print("\n" + "=" * 50)
    print("Demo complete.")
    print("\nNext steps:")
    print("  - Run 'prime-profile --help' to see CLI options")
    print("  - Try 'prime-profile sieve 100000 --super --count --time'")


if __name__ == "__main__":
    main()
