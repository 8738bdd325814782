# AoC 2025 - Day 5 Fresh Ingredient Ranges (Part 1 & Part 2)
# Created:      2026-10-19
# Modified:     2026-10-19

import logging

from ..errors import InputError

logger = logging.getLogger(__name__)


def parse_range(line: str, line_no: int) -> tuple[int, int]:
    values = line.split('-')
    if len(values) != 2:
        raise InputError(f"range must look like 'lo-hi', got {line!r}", line_no)
    try:
        lo, hi = int(values[0]), int(values[1])
    except ValueError:
        raise InputError(f"invalid number in range {line!r}", line_no) from None
    if lo > hi:
        raise InputError(f"range start {lo} is above its end {hi}", line_no)
    return lo, hi


def parse_inventory(text: str) -> tuple[list[tuple[int, int]], list[int]]:
    """Split the input into the fresh ranges and the available ingredient IDs."""
    ranges = []
    ingredients = []
    ranges_done = False

    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            # the first blank line after the ranges starts the ID section
            if ranges:
                ranges_done = True
            continue

        if not ranges_done:
            ranges.append(parse_range(line, line_no))
        else:
            try:
                ingredients.append(int(line))
            except ValueError:
                raise InputError(f"invalid ingredient ID {line!r}", line_no) from None

    if not ranges:
        raise InputError("missing fresh range section")
    if not ingredients:
        raise InputError("missing ingredient ID section")

    logger.debug("parsed %d ranges and %d ingredient IDs", len(ranges), len(ingredients))
    return ranges, ingredients


def merge_ranges(ranges: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Union of the ranges as sorted, disjoint, non-adjacent ranges."""
    merged = []

    for lo, hi in sorted(ranges):
        if not merged or lo > merged[-1][1] + 1:
            merged.append([lo, hi])
        else:
            merged[-1][1] = max(merged[-1][1], hi)

    return [(lo, hi) for lo, hi in merged]


def is_fresh(ing_id: int, ranges: list[tuple[int, int]]) -> bool:
    return any(lo <= ing_id <= hi for lo, hi in ranges)


def solve(text: str) -> tuple[int, int]:
    ranges, ingredients = parse_inventory(text)
    ranges = merge_ranges(ranges)

    num_fresh = sum(is_fresh(ing_id, ranges) for ing_id in ingredients)
    num_covered_ids = sum(hi - lo + 1 for lo, hi in ranges)

    return num_fresh, num_covered_ids
