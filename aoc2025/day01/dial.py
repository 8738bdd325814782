# AoC 2025 - Day 1 Safe Dial (Part 1 & Part 2)
# Created:      2026-10-19
# Modified:     2026-10-19

import logging
from typing import Tuple

from ..errors import InputError

logger = logging.getLogger(__name__)

DIAL_SIZE = 100
START_POS = 50


def parse_rotations(text: str) -> list[int]:
    """Rotations as signed click counts: right is positive, left negative."""
    rotations = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue

        direction, distance = line[0], line[1:]
        if not distance:
            raise InputError(f"missing distance in {line!r}", line_no)
        if not distance.isdecimal():
            raise InputError(f"invalid distance {distance!r}", line_no)

        match direction:
            case "R":
                rotations.append(int(distance))
            case "L":
                rotations.append(-int(distance))
            case _:
                raise InputError(f"invalid direction in {line!r}, expected 'L' or 'R'", line_no)

    logger.debug("parsed %d rotations", len(rotations))
    return rotations


def turn_knob(pos: int, value: int) -> Tuple[int, int]:
    """
    Turn the dial from `pos` by `value` clicks.

    Returns the final position and the number of clicks that landed on 0
    along the way, the final one included.
    """
    turn_abs = abs(value)
    if value >= 0:
        hits = (pos + turn_abs) // DIAL_SIZE
    elif pos == 0:
        hits = turn_abs // DIAL_SIZE
    elif turn_abs < pos:
        hits = 0
    else:
        hits = 1 + (turn_abs - pos) // DIAL_SIZE

    return (pos + value) % DIAL_SIZE, hits


def solve(text: str) -> tuple[int, int]:
    pos = START_POS
    zero_count = 0
    hit_count = 0

    for value in parse_rotations(text):
        pos, hits = turn_knob(pos, value)
        zero_count += pos == 0
        hit_count += hits

    return zero_count, hit_count
