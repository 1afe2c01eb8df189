import pytest

from .puzzles import CLASSIC_PUZZLE, CLASSIC_SOLUTION


@pytest.fixture
def classic_puzzle():
    return [row[:] for row in CLASSIC_PUZZLE]


@pytest.fixture
def classic_solution():
    return [row[:] for row in CLASSIC_SOLUTION]


@pytest.fixture
def classic_text():
    return "\n".join(
        " ".join(str(v) if v else "." for v in row) for row in CLASSIC_PUZZLE
    ) + "\n"
