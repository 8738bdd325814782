# AoC 2025 - Day 4 Grid
# Created:      2026-10-19
# Modified:     2026-10-19

MARK = '@'
EMPTY = '.'

# a marked cell is accessible when fewer than half of its neighbours are marked
ACCESS_LIMIT = 4

NEIGHBOUR_OFFSETS = tuple(
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if (dr, dc) != (0, 0)
)

Position = tuple[int, int]


def split_rows(text: str) -> list[str]:
    rows = text.split('\n')
    if rows[-1] == '':
        rows.pop()
    return [row[:-1] if row.endswith('\r') else row for row in rows]


class Grid:
    """
    Character field of paper rolls.

    Rows keep their own lengths, so a short row simply has no cells past
    its end. `cols` is the length of the longest row.
    """

    def __init__(self, text: str = ''):
        self._cells = [list(row) for row in split_rows(text)]
        self._rows = len(self._cells)
        self._cols = max((len(row) for row in self._cells), default=0)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _in_bounds(self, row: int, col: int) -> bool:
        # negative indices would wrap around in a list
        if row < 0 or col < 0:
            return False
        return row < self._rows and col < len(self._cells[row])

    def is_marked(self, row: int, col: int) -> bool:
        return self._in_bounds(row, col) and self._cells[row][col] == MARK

    def count_marked_neighbours(self, row: int, col: int) -> int:
        return sum(
            self.is_marked(row + dr, col + dc) for dr, dc in NEIGHBOUR_OFFSETS
        )

    def is_accessible(self, row: int, col: int) -> bool:
        if not self.is_marked(row, col):
            return False
        return self.count_marked_neighbours(row, col) < ACCESS_LIMIT

    def accessible_positions(self) -> list[Position]:
        """Accessible cells in row-major order."""
        return [
            (row, col)
            for row in range(self._rows)
            for col in range(len(self._cells[row]))
            if self.is_accessible(row, col)
        ]

    def clear(self, row: int, col: int):
        if self._in_bounds(row, col):
            self._cells[row][col] = EMPTY

    def marked_count(self) -> int:
        return sum(row.count(MARK) for row in self._cells)

    def copy(self) -> 'Grid':
        dup = Grid()
        dup._cells = [row[:] for row in self._cells]
        dup._rows = self._rows
        dup._cols = self._cols
        return dup

    def __str__(self):
        return '\n'.join(''.join(row) for row in self._cells)

    def __repr__(self):
        return f'Grid(rows={self._rows}, cols={self._cols}, marked={self.marked_count()})'
