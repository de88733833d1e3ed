"""Command-line argument parsing for headping.

Maps the ping-style flags (-c, -i, -t, -v) onto settings overrides.
Malformed arguments exit with status 2 and a usage message.
"""

import argparse
from typing import Any


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _positive_int(value: str) -> int:
    number = _non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("must be positive, got 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="headping",
        description="Ping-like HTTP HEAD probe for a list of domains.",
    )
    parser.add_argument(
        "domains",
        nargs="*",
        metavar="DOMAIN",
        help="Zero or more domains to check. If none are given, "
        "a list of top domains is used.",
    )
    parser.add_argument(
        "-c",
        "--count",
        type=_positive_int,
        default=None,
        help="Stop after this many tests have been run.",
    )
    parser.add_argument(
        "-i",
        "--wait",
        type=_non_negative_int,
        default=None,
        metavar="MS",
        help="Wait this many milliseconds between tests (default: 1000).",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=_positive_int,
        default=None,
        metavar="MS",
        help="Wait this many milliseconds for each test to complete (default: 1000).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Be more verbose (repeat for more detail).",
    )
    return parser


def settings_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate parsed flags into Settings field overrides.

    Flags that were not given map to None, leaving the environment
    defaults in place.
    """
    return {
        "count": args.count,
        "wait_ms": args.wait,
        "timeout_ms": args.timeout,
    }
