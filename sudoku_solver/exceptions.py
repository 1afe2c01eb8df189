# exceptions.py


class SudokuError(Exception):
    """Base class for every error raised by sudoku_solver."""


class InvalidDimension(SudokuError, ValueError):
    """Box size is not a positive integer, or rows do not form a square board."""


class InvalidValue(SudokuError, ValueError):
    pass


class OutOfRange(SudokuError, IndexError):
    pass


class InputFormatError(SudokuError, ValueError):
    """Board text could not be parsed."""


class UnsolvableSudoku(SudokuError):
    pass
