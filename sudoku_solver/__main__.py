# __main__.py

import argparse
import logging
import sys
from typing import List, Optional

from cardinal_pythonlib.argparse_func import RawDescriptionArgumentDefaultsHelpFormatter  # noqa
from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from .exceptions import SudokuError
from .solver import SolveState, Solver
from .textio import format_grid, parse_grid

log = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_UNSOLVABLE = 1
EXIT_BAD_INPUT = 2


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point.
    """
    parser = argparse.ArgumentParser(
        prog="sudoku-solve",
        formatter_class=RawDescriptionArgumentDefaultsHelpFormatter,
        description=(
            "Solve an NxN Sudoku by backtracking. One row per line, values "
            "separated by spaces, 0 or '.' for empty cells."
        ),
    )
    parser.add_argument(
        "filename", nargs="?", default=None,
        help="Puzzle file to read (default: standard input)")
    parser.add_argument(
        "--box-size", type=int, default=None,
        help="Side length of one box (default: inferred from the row count)")
    parser.add_argument(
        "--verbose", action="store_true", help="Be verbose")
    args = parser.parse_args(argv)

    main_only_quicksetup_rootlogger(level=logging.DEBUG if args.verbose
                                    else logging.INFO)

    try:
        if args.filename:
            log.debug("Reading %s", args.filename)
            with open(args.filename, "rt") as f:
                text = f.read()
        else:
            text = sys.stdin.read()
        grid = parse_grid(text, args.box_size)
    except (OSError, SudokuError) as e:
        log.error("Could not read puzzle: %s", e)
        return EXIT_BAD_INPUT

    log.info("Solving:\n%s", format_grid(grid))
    print("Searching for a solution!")
    solver = Solver(grid)
    if solver.solve() is SolveState.SOLVED:
        print("Found a solution")
        print(format_grid(grid))
        return EXIT_SOLVED

    print("No Possible Solution Found!")
    return EXIT_UNSOLVABLE


if __name__ == "__main__":
    sys.exit(main())
