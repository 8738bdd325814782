# AoC 2025 - Day 3 Battery Joltage (Part 1 & Part 2)
# Created:      2026-10-19
# Modified:     2026-10-19

import logging

from ..errors import InputError

logger = logging.getLogger(__name__)

JOLTAGE_WIDTHS = (2, 12)


def parse_banks(text: str) -> list[list[int]]:
    banks = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        for ch in line:
            if not ch.isdecimal():
                raise InputError(f"invalid character {ch!r} in battery bank", line_no)
        banks.append([int(ch) for ch in line])

    logger.debug("parsed %d battery banks", len(banks))
    return banks


def max_joltage(digits: list[int], width: int) -> int:
    """
    Largest number made of `width` digits of the bank, kept in order.

    Each pick takes the leftmost maximum among the digits that still leave
    enough of the bank for the remaining picks.
    """
    if len(digits) < width:
        raise InputError(f"bank has {len(digits)} batteries, need at least {width}")

    result = 0
    start = 0
    for idx in range(width):
        stop = len(digits) - (width - idx - 1)
        pool = digits[start:stop]
        d = max(pool)
        start += pool.index(d) + 1
        result = result * 10 + d

    return result


def total_joltage(banks: list[list[int]], width: int) -> int:
    total = 0
    for bank_no, bank in enumerate(banks, start=1):
        try:
            total += max_joltage(bank, width)
        except InputError as exc:
            raise InputError(f"bank {bank_no}: {exc}") from exc
    return total


def solve(text: str) -> tuple[int, int]:
    banks = parse_banks(text)
    return tuple(total_joltage(banks, width) for width in JOLTAGE_WIDTHS)
