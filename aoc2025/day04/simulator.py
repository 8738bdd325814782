# AoC 2025 - Day 4 Removal Simulator (Part 1 & Part 2)
# Created:      2026-10-19
# Modified:     2026-10-19

import logging
from typing import Iterator

from .grid import Grid

logger = logging.getLogger(__name__)


def count_accessible(grid: Grid) -> int:
    count = 0
    for row in range(grid.rows):
        for col in range(grid.cols):
            if grid.is_marked(row, col) and grid.is_accessible(row, col):
                count += 1
    return count


def removal_rounds(grid: Grid) -> Iterator[int]:
    """
    Peel the grid one round at a time, yielding how many rolls each round
    removed. The grid is modified in place.

    Every round works from a full snapshot of the accessible cells, so a
    cell cleared early in the round does not change how the rest of that
    round is judged.
    """
    round_idx = 0
    while True:
        accessible = grid.accessible_positions()
        if not accessible:
            logger.debug("no accessible rolls left after %d rounds", round_idx)
            return

        for row, col in accessible:
            grid.clear(row, col)

        round_idx += 1
        logger.debug("round %d removed %d rolls", round_idx, len(accessible))
        yield len(accessible)


def count_removable(grid: Grid) -> int:
    return sum(removal_rounds(grid))


def solve(text: str) -> tuple[int, int]:
    # part 2 mutates its grid, so each part gets its own
    accessible = count_accessible(Grid(text))
    removed = count_removable(Grid(text))
    return accessible, removed
