#!/usr/bin/env python3
"""
Command-line interface for the storefront catalog.

Usage:
    uv run python cli.py [command] [options]

Commands:
    demo        Stock the store, seat customers and print their receipts
    test        Run the test suite

Examples:
    uv run python cli.py demo
    uv run python cli.py demo --catalog catalog.json --log-level INFO
    uv run python cli.py test -v
"""

import argparse
import subprocess
import sys
from pathlib import Path
from typing import Optional


def run_demo(catalog: Optional[Path], log_level: str) -> None:
    """Run the store walkthrough."""
    from pydantic import ValidationError

    from storefront.demo import configure_logging, run_store_demo
    from storefront.event_bus import get_event_bus
    from storefront.seed import SeedError, load_seed

    configure_logging(log_level)
    # Nothing reads the event log in a demo run
    get_event_bus().set_logging(False)

    try:
        seed = load_seed(catalog) if catalog else None
        run_store_demo(seed)
    except (OSError, ValidationError, SeedError) as e:
        print(f"Could not run demo: {e}", file=sys.stderr)
        sys.exit(1)


def run_tests(args: list[str]) -> None:
    """Run the test suite."""
    cmd = ["uv", "run", "pytest"] + args
    subprocess.run(cmd)


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Storefront Catalog CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s demo
  %(prog)s demo --catalog catalog.json
  %(prog)s test -v
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    demo_parser = subparsers.add_parser("demo", help="Run the store walkthrough")
    demo_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="JSON catalog seed (defaults to the built-in catalog)",
    )
    demo_parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    test_parser = subparsers.add_parser("test", help="Run the test suite")
    test_parser.add_argument(
        "pytest_args",
        nargs="*",
        default=[],
        help="Arguments to pass to pytest",
    )

    args = parser.parse_args()

    if args.command == "demo":
        run_demo(args.catalog, args.log_level)
    elif args.command == "test":
        run_tests(args.pytest_args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
