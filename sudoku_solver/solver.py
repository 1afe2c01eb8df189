# solver.py

import enum
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .exceptions import UnsolvableSudoku
from .grid import EMPTY, Board, Cell, Grid

log = logging.getLogger(__name__)


class SolveState(enum.Enum):
    SEARCHING = "searching"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    CANCELLED = "cancelled"


@dataclass
class SolveStats:
    iterations: int = 0
    assignments: int = 0
    backtracks: int = 0


class Solver:
    """
    Chronological backtracking solver.

    Cells are filled in row-major order, trying values in increasing
    order. Every committed cell is pushed onto an explicit trail, so
    backtracking pops the trail instead of unwinding the call stack.
    The grid is modified in place.
    """

    def __init__(
        self, grid: Grid, should_stop: Optional[Callable[[], bool]] = None
    ) -> None:
        self.grid = grid
        self.should_stop = should_stop
        self.state = SolveState.SEARCHING
        self.stats = SolveStats()
        self._trail: List[Cell] = []
        self._target: Optional[Cell] = None

    @property
    def trail(self) -> Tuple[Cell, ...]:
        return tuple(self._trail)

    def solve(self) -> SolveState:
        """
        Run the search until the grid is full or no assignment works.
        Returns the terminal state, also kept in self.state.

        After CANCELLED, the next call carries on from where the search
        stopped, keeping the trail and the stats.
        """
        grid = self.grid
        n = grid.side_length
        if self.state is SolveState.CANCELLED:
            target = self._target
            log.debug(
                "Resuming search at %s with %d cells on the trail",
                target, len(self._trail),
            )
        else:
            self.stats = SolveStats()
            self._trail = []
            log.debug(
                "Solving %dx%d board with %d empty cells",
                n, n, grid.empty_count(),
            )
            target = grid.find_first_empty()
        self.state = SolveState.SEARCHING
        self._target = None

        while self.state is SolveState.SEARCHING:
            if target is None:
                self.state = SolveState.SOLVED
                break
            if self.should_stop is not None and self.should_stop():
                self.state = SolveState.CANCELLED
                self._target = target
                break
            self.stats.iterations += 1

            row, col = target
            current = grid.get(row, col)
            candidate = 1 if current == EMPTY else current + 1
            while candidate <= n and not self.is_valid_num(candidate, row, col):
                candidate += 1

            if candidate <= n:
                grid.set(row, col, candidate)
                self._trail.append(target)
                self.stats.assignments += 1
                target = grid.find_first_empty()
                continue

            # dead end
            grid.set(row, col, EMPTY)
            if not self._trail:
                self.state = SolveState.UNSOLVABLE
                break
            target = self._trail.pop()
            self.stats.backtracks += 1

        log.debug("Search finished: %s (%s)", self.state.value, self.stats)
        return self.state

    def is_valid_num(self, value: int, row: int, col: int) -> bool:
        """
        True if no cell holding value shares a row, column or box
        with (row, col). Scans the whole board.
        """
        grid = self.grid
        target = grid.box_bounds(row, col)
        for a, b, v in grid.cells():
            if v != value:
                continue
            if a == row or b == col:
                return False
            bounds = grid.box_bounds(a, b)
            if bounds.min_row == target.min_row and bounds.max_col == target.max_col:
                return False
        return True


def solve_board(
    rows: Sequence[Sequence[int]],
    box_size: Optional[int] = None,
    assert_solvable: bool = False,
) -> Optional[Board]:
    """
    Solve a board given as a list of rows (0 for empty cells).

    Returns the solved rows, or None if there is no solution
    (raises UnsolvableSudoku instead if assert_solvable=True).
    The input rows are not modified.
    """
    grid = Grid.from_rows(rows, box_size)
    state = Solver(grid).solve()
    if state is SolveState.SOLVED:
        return grid.board_copy()
    if assert_solvable:
        raise UnsolvableSudoku("No solution found")
    return None
