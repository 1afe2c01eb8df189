# textio.py

import math
from typing import List, Optional

from .exceptions import InputFormatError, InvalidDimension
from .grid import EMPTY, Grid

EMPTY_TOKENS = {".", "_"}


def parse_row(line: str, side_length: int) -> List[int]:
    """
    Parse one row of whitespace-separated values.
    "." and "_" mark empty cells, as does 0.
    """
    tokens = line.split()
    if len(tokens) != side_length:
        raise InputFormatError(
            f"Expected {side_length} values, got {len(tokens)}: {line.strip()!r}"
        )

    values: List[int] = []
    for token in tokens:
        if token in EMPTY_TOKENS:
            values.append(EMPTY)
            continue
        try:
            v = int(token)
        except ValueError:
            raise InputFormatError(f"Not a number: {token!r}") from None
        if not 0 <= v <= side_length:
            raise InputFormatError(
                f"Value {v} is outside [0, {side_length}]"
            )
        values.append(v)
    return values


def parse_grid(text: str, box_size: Optional[int] = None) -> Grid:
    """
    Build a Grid from text, one row per line.
    Blank lines and lines starting with "#" are ignored.
    """
    lines = [
        line for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    ]

    if box_size is None:
        root = math.isqrt(len(lines))
        if root == 0 or root * root != len(lines):
            raise InvalidDimension(
                f"Cannot infer box size from {len(lines)} rows. "
                "Provide the box size explicitly."
            )
        box_size = root

    grid = Grid(box_size)
    if len(lines) != grid.side_length:
        raise InputFormatError(
            f"Expected {grid.side_length} rows, got {len(lines)}"
        )
    for r, line in enumerate(lines):
        for c, v in enumerate(parse_row(line, grid.side_length)):
            grid.set(r, c, v)
    return grid


def format_grid(grid: Grid) -> str:
    return grid.format_ascii()
