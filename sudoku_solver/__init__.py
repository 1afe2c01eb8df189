from sudoku_solver.exceptions import (
    InputFormatError,
    InvalidDimension,
    InvalidValue,
    OutOfRange,
    SudokuError,
    UnsolvableSudoku,
)
from sudoku_solver.grid import Board, BoxBounds, Cell, Grid
from sudoku_solver.solver import SolveState, SolveStats, Solver, solve_board
from sudoku_solver.textio import format_grid, parse_grid, parse_row

__all__ = [
    "Board",
    "BoxBounds",
    "Cell",
    "Grid",
    "InputFormatError",
    "InvalidDimension",
    "InvalidValue",
    "OutOfRange",
    "SolveState",
    "SolveStats",
    "Solver",
    "SudokuError",
    "UnsolvableSudoku",
    "format_grid",
    "parse_grid",
    "parse_row",
    "solve_board",
]
