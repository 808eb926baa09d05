#!/usr/bin/env python3
"""
Command line front end: print rook phone-number counts for a range of lengths.

    rookpad                      # lengths 1..7, dynamic programming
    rookpad -l 10                # a single length
    rookpad --min 3 --max 5      # inclusive range
    rookpad -r 3-5 -s enum       # hyphen range, exhaustive enumeration

Malformed numbers or strategy names are ignored with a warning and the
defaults kept.
"""

import argparse
import logging
from typing import List, Optional, Tuple

from rookpad.common.shared_types import Strategy
from rookpad.common.validation import EnumerationLimitExceeded
from rookpad.config import EngineConfig
from rookpad.counting.engine import CountingEngine

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 1
DEFAULT_MAX_LENGTH = 7


def _parse_int(text: Optional[str], default: int, flag: str) -> int:
    if text is None:
        return default
    try:
        return int(text)
    except ValueError:
        logger.warning("Ignoring non-numeric %s %r; using %d", flag, text, default)
        return default


def _parse_range(text: Optional[str]) -> Optional[Tuple[int, int]]:
    if text is None:
        return None
    parts = text.split("-")
    if len(parts) != 2:
        logger.warning("Ignoring malformed --range %r; expected A-B", text)
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        logger.warning("Ignoring malformed --range %r; expected A-B", text)
        return None


def resolve_lengths(args: argparse.Namespace) -> Tuple[int, int]:
    """--length beats --range beats --min/--max; min/max are swapped if reversed."""
    lo = _parse_int(args.min, DEFAULT_MIN_LENGTH, "--min")
    hi = _parse_int(args.max, DEFAULT_MAX_LENGTH, "--max")

    span = _parse_range(args.range)
    if span is not None:
        lo, hi = span

    if args.length is not None:
        try:
            lo = hi = int(args.length)
        except ValueError:
            logger.warning("Ignoring non-numeric --length %r", args.length)

    if lo > hi:
        logger.warning("Minimum length %d exceeds maximum %d; swapping", lo, hi)
        lo, hi = hi, lo
    return lo, hi


def resolve_strategy(name: Optional[str], default: Strategy) -> Strategy:
    if name is None:
        return default
    try:
        return Strategy.from_name(name)
    except ValueError:
        logger.warning("Ignoring unknown strategy %r; using %s", name, default.name.lower())
        return default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rookpad",
        description="Count phone numbers a rook can dial on a telephone keypad.",
    )
    # Numbers are taken as strings so bad values degrade to defaults instead of exiting
    parser.add_argument("-l", "--length", type=str, default=None,
                        help="count a single sequence length")
    parser.add_argument("--min", type=str, default=None,
                        help=f"smallest length (defaults to {DEFAULT_MIN_LENGTH})")
    parser.add_argument("--max", type=str, default=None,
                        help=f"largest length (defaults to {DEFAULT_MAX_LENGTH})")
    parser.add_argument("-r", "--range", type=str, default=None,
                        help="hyphen-separated range, e.g. 3-5")
    parser.add_argument("-s", "--strategy", type=str, default=None,
                        help="dp (default) or enumeration")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = EngineConfig.from_env()
    strategy = resolve_strategy(args.strategy, config.default_strategy)
    lo, hi = resolve_lengths(args)

    engine = CountingEngine(config=config)
    try:
        results = engine.count_range(lo, hi, strategy)
    except EnumerationLimitExceeded as exc:
        logger.error("%s", exc)
        return 1
    for length, total in results.items():
        print(f"Count of valid {length}-digit phone numbers: {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
