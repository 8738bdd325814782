# AoC 2025 - Day 2 Repeated Product IDs (Part 1 & Part 2)
# Created:      2026-10-19
# Modified:     2026-10-19

import logging

from ..errors import InputError

logger = logging.getLogger(__name__)


# for part 1
def is_doubled(num: int) -> bool:
    digits = str(num)
    if len(digits) % 2:
        return False
    half = len(digits) // 2
    return digits == 2 * digits[:half]


# for part 2
def is_repeated(num: int) -> bool:
    digits = str(num)
    num_digits = len(digits)

    for seq_len in range(1, num_digits // 2 + 1):
        if num_digits % seq_len:
            continue
        if digits == (num_digits // seq_len) * digits[:seq_len]:
            return True

    return False


def parse_intervals(text: str) -> list[tuple[int, int]]:
    intervals = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        for interval in line.split(','):
            interval = interval.strip()
            if not interval:
                continue

            values = interval.split('-')
            if len(values) != 2:
                raise InputError(f"range must look like 'lo-hi', got {interval!r}", line_no)
            try:
                lower_bound, upper_bound = int(values[0]), int(values[1])
            except ValueError:
                raise InputError(f"invalid number in range {interval!r}", line_no) from None
            if lower_bound > upper_bound:
                raise InputError(f"range start {lower_bound} is above its end {upper_bound}", line_no)

            intervals.append((lower_bound, upper_bound))

    logger.debug("parsed %d id ranges", len(intervals))
    return intervals


def solve(text: str) -> tuple[int, int]:
    doubled_sum = 0
    repeated_sum = 0

    for lower_bound, upper_bound in parse_intervals(text):
        for num in range(lower_bound, upper_bound + 1):
            if is_doubled(num):
                doubled_sum += num
            if is_repeated(num):
                repeated_sum += num

    return doubled_sum, repeated_sum
