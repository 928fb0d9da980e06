"""Command-line interface for prime_profile."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from prime_profile import __version__

logger = logging.getLogger("prime_profile.cli")


def cmd_sieve(args: argparse.Namespace) -> int:
    """Find primes up to max, optionally only the super, happy or sexy ones."""
    from prime_profile.config import FilterConfig
    from prime_profile.utils.report import run_report

    config = FilterConfig(
        only_super=args.super,
        only_happy=args.happy,
        only_sexy=args.sexy,
    )
    logger.debug("Sieve: max=%d, filters=%s", args.max, config.enabled() or "none")

    if config.only_sexy and (config.only_super or config.only_happy):
        logger.warning("Combining --sexy with --super or --happy gives unreliable output")

    sink = print if args.print else None
    report = run_report(args.max, config, verify=args.verify, sink=sink)

    if args.count:
        print(f"COUNT: {report.emitted_count}")
    if args.time:
        print(f"TIME: {report.elapsed_seconds:.6f}")
    if args.verify:
        print(f"VERIFIED: {report.verified}")

    if args.output:
        output = report.save(Path(args.output))
        logger.info("Report saved to %s", output)

    if args.verify and not report.verified:
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prime-profile",
        description="Runs some tasks that can be profiled.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sieve_parser = subparsers.add_parser(
        "sieve", help="Use the Sieve of Eratosthenes to find prime numbers"
    )
    sieve_parser.add_argument("max", type=int, help="The number to count to")
    sieve_parser.add_argument("--super", action="store_true", help="Only accept super primes")
    sieve_parser.add_argument("--happy", action="store_true", help="Only accept happy primes")
    sieve_parser.add_argument("--sexy", action="store_true", help="Only accept sexy primes")
    sieve_parser.add_argument("--print", action="store_true", help="Print the primes to standard out")
    sieve_parser.add_argument("--count", action="store_true", help="Print the count to standard out")
    sieve_parser.add_argument("--time", action="store_true", help="Print the elapsed time")
    sieve_parser.add_argument("--verify", action="store_true", help="Check primes against the reference sieve")
    sieve_parser.add_argument("--output", "-o", default=None, help="Write a JSON report to this file")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    from prime_profile.utils.logging import setup_logger

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logger(args.verbose, Path(args.log_file) if args.log_file else None)

    commands = {
        "sieve": cmd_sieve,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
