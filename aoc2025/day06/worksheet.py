# AoC 2025 - Day 6 Math Worksheet (Part 1 & Part 2)
# Created:      2026-10-19
# Modified:     2026-10-19

import logging
import math
from typing import NamedTuple

from ..errors import InputError

logger = logging.getLogger(__name__)

OPERATORS = {
    '+': sum,
    '*': math.prod,
}


class Problem(NamedTuple):
    op: str
    operands: list[int]

    def evaluate(self) -> int:
        return OPERATORS[self.op](self.operands)


def split_blocks(text: str) -> list[list[str]]:
    """
    Cut the worksheet into problem blocks.

    Lines are padded to the same width; a column made only of spaces
    separates two problems. Each block is the list of its row slices, the
    operator row last.
    """
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return []

    line_width = max(len(line) for line in lines)
    lines = [line.ljust(line_width) for line in lines]

    is_col_separator = [all(line[c_idx] == ' ' for line in lines) for c_idx in range(line_width)]

    blocks = []
    c_idx = 0
    while c_idx < line_width:
        if is_col_separator[c_idx]:
            c_idx += 1
            continue

        start = c_idx
        while c_idx < line_width and not is_col_separator[c_idx]:
            c_idx += 1
        blocks.append([line[start:c_idx] for line in lines])

    return blocks


def _to_int(digits: str, block_no: int) -> int:
    try:
        return int(digits)
    except ValueError:
        raise InputError(f"problem {block_no}: invalid number {digits!r}") from None


def parse_worksheet(text: str, vertical: bool = False) -> list[Problem]:
    """
    Read every problem on the worksheet.

    Row-wise (default), each row of a block is one operand. With `vertical`,
    each column of a block, read top to bottom, is one operand instead.
    """
    problems = []

    for block_no, block in enumerate(split_blocks(text), start=1):
        opds = block[:-1]
        op = block[-1].strip()
        if op not in OPERATORS:
            raise InputError(f"problem {block_no}: unknown operator {op!r}")

        if vertical:
            columns = ("".join(row[col_idx] for row in opds) for col_idx in range(len(block[0])))
            raw = [col.strip() for col in columns]
        else:
            raw = [row.strip() for row in opds]
        operands = [_to_int(d, block_no) for d in raw if d]

        if not operands:
            raise InputError(f"problem {block_no}: no operands")
        problems.append(Problem(op, operands))

    logger.debug("parsed %d problems (vertical=%s)", len(problems), vertical)
    return problems


def grand_total(problems: list[Problem]) -> int:
    return sum(problem.evaluate() for problem in problems)


def solve(text: str) -> tuple[int, int]:
    p1 = grand_total(parse_worksheet(text))
    p2 = grand_total(parse_worksheet(text, vertical=True))
    return p1, p2
