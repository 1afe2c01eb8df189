# grid.py

import math
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .exceptions import InvalidDimension, InvalidValue, OutOfRange

Board = List[List[int]]

EMPTY = 0


class Cell(NamedTuple):
    row: int
    col: int


class BoxBounds(NamedTuple):
    """Inclusive coordinate range of one sub-box."""

    min_row: int
    max_row: int
    min_col: int
    max_col: int


class Grid:
    """
    Square Sudoku board made of box_size x box_size boxes.

    Holds side_length x side_length integers in [0, side_length],
    where 0 marks an empty cell.
    """

    def __init__(self, box_size: int) -> None:
        if isinstance(box_size, bool) or not isinstance(box_size, int):
            raise InvalidDimension(f"Box size must be an integer, got {box_size!r}")
        if box_size < 1:
            raise InvalidDimension(f"Box size cannot be less than 1, got {box_size}")
        self._box_size = box_size
        self._side_length = box_size * box_size
        self._cells: Board = [
            [EMPTY] * self._side_length for _ in range(self._side_length)
        ]

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[int]], box_size: Optional[int] = None
    ) -> "Grid":
        """
        Build a grid and populate it from a list of rows.
        The box size is inferred from the number of rows when omitted.
        """
        if box_size is None:
            root = math.isqrt(len(rows))
            if root * root != len(rows) or root == 0:
                raise InvalidDimension(
                    f"Cannot infer box size for {len(rows)} rows. "
                    "Row count must be a non-zero perfect square."
                )
            box_size = root

        grid = cls(box_size)
        if len(rows) != grid.side_length:
            raise InvalidDimension(
                f"Expected {grid.side_length} rows, got {len(rows)}"
            )
        for r, row in enumerate(rows):
            if len(row) != grid.side_length:
                raise InvalidDimension(
                    f"Row {r} has {len(row)} values, expected {grid.side_length}"
                )
            for c, v in enumerate(row):
                grid.set(r, c, v)
        return grid

    @property
    def box_size(self) -> int:
        return self._box_size

    @property
    def side_length(self) -> int:
        return self._side_length

    def get(self, row: int, col: int) -> int:
        self._check_position(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        self._check_position(row, col)
        if (
            isinstance(value, bool)
            or not isinstance(value, int)
            or not 0 <= value <= self._side_length
        ):
            raise InvalidValue(
                f"Value must be an integer in [0, {self._side_length}], got {value!r}"
            )
        self._cells[row][col] = value

    def clear(self, row: int, col: int) -> None:
        self.set(row, col, EMPTY)

    def box_bounds(self, row: int, col: int) -> BoxBounds:
        """Return the bounds of the box containing (row, col)."""
        self._check_position(row, col)
        min_row = (row // self._box_size) * self._box_size
        min_col = (col // self._box_size) * self._box_size
        return BoxBounds(
            min_row,
            min_row + self._box_size - 1,
            min_col,
            min_col + self._box_size - 1,
        )

    def find_first_empty(self) -> Optional[Cell]:
        """
        Scan in row-major order and return the first empty cell,
        or None when the board is full.
        """
        for r, row in enumerate(self._cells):
            for c, v in enumerate(row):
                if v == EMPTY:
                    return Cell(r, c)
        return None

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (row, col, value) for every cell in row-major order."""
        for r, row in enumerate(self._cells):
            for c, v in enumerate(row):
                yield r, c, v

    def empty_count(self) -> int:
        return sum(row.count(EMPTY) for row in self._cells)

    def is_complete(self) -> bool:
        return self.find_first_empty() is None

    def is_consistent(self) -> bool:
        """
        Check that no nonzero value repeats in a row, column or box.
        Empty cells are allowed.
        """
        n = self._side_length
        rows = [set() for _ in range(n)]
        cols = [set() for _ in range(n)]
        boxes = [set() for _ in range(n)]

        for r, c, v in self.cells():
            if v == EMPTY:
                continue
            b = (r // self._box_size) * self._box_size + (c // self._box_size)
            if v in rows[r] or v in cols[c] or v in boxes[b]:
                return False
            rows[r].add(v)
            cols[c].add(v)
            boxes[b].add(v)
        return True

    def is_solved(self) -> bool:
        return self.is_complete() and self.is_consistent()

    def board_copy(self) -> Board:
        return [row[:] for row in self._cells]

    def copy(self) -> "Grid":
        return Grid.from_rows(self._cells, self._box_size)

    def _check_position(self, row: int, col: int) -> None:
        n = self._side_length
        if (
            isinstance(row, bool)
            or isinstance(col, bool)
            or not (isinstance(row, int) and isinstance(col, int))
        ):
            raise OutOfRange(f"Coordinates must be integers, got ({row!r}, {col!r})")
        if not (0 <= row < n and 0 <= col < n):
            raise OutOfRange(
                f"Cell ({row}, {col}) is outside a {n}x{n} board"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._box_size == other._box_size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(box_size={self._box_size}, cells={self._cells!r})"

    def format_ascii(self) -> str:
        """
        Render the board with "+---+" lines between box bands and
        "|" between boxes. Empty cells are shown as ".".
        """
        n = self._side_length
        box = self._box_size
        cell_len = len(str(n))
        horiz = ("+-" + "-" * (cell_len + 1) * box) * box + "+"

        lines = []
        for r, row in enumerate(self._cells):
            if r % box == 0:
                lines.append(horiz)
            cells = [(str(v) if v != EMPTY else ".").rjust(cell_len) for v in row]
            # vertical separators between boxes
            line = "| "
            for b in range(box):
                start = b * box
                line += " ".join(cells[start: start + box]) + " | "
            lines.append(line.rstrip())
        lines.append(horiz)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format_ascii()
