# AoC 2025 - Command Line Entry Point
# Created:      2026-10-19
# Modified:     2026-10-19

"""
Run one day's solver on an input file and print both parts.

Example:
    aoc2025 input.txt             # day 4
    aoc2025 input.txt --day 6 -v
"""

import argparse
import logging
from pathlib import Path

from . import day01, day02, day03, day04, day05, day06
from .errors import InputError

logger = logging.getLogger(__name__)

SOLVERS = {
    1: day01.solve,
    2: day02.solve,
    3: day03.solve,
    4: day04.solve,
    5: day05.solve,
    6: day06.solve,
}

DEFAULT_DAY = 4


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="aoc2025",
        description="Advent of Code 2025 puzzle solvers",
    )
    parser.add_argument("input", type=Path, help="Puzzle input file")
    parser.add_argument(
        "--day", "-d",
        type=int,
        choices=sorted(SOLVERS),
        default=DEFAULT_DAY,
        help=f"Which day's solver to run (default: {DEFAULT_DAY})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log solver progress to stderr",
    )
    return parser.parse_args(argv)


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        text = args.input.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Cannot read {args.input}: {exc}")
        return 1

    logger.info(f"Running day {args.day} on {args.input}")
    try:
        p1, p2 = SOLVERS[args.day](text)
    except InputError as exc:
        logger.error(f"Invalid input in {args.input}: {exc}")
        return 1

    print(f"Part 1: {p1}")
    print(f"Part 2: {p2}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
