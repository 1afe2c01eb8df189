import io
import logging

import pytest

from sudoku_solver.__main__ import (
    EXIT_BAD_INPUT,
    EXIT_SOLVED,
    EXIT_UNSOLVABLE,
    main,
)


@pytest.fixture(autouse=True)
def root_log_levels(monkeypatch):
    """
    Record the level main() asks for and apply it to the root logger
    without replacing the handlers pytest captures with.
    """
    root = logging.getLogger()
    saved = root.level
    levels = []

    def quicksetup(level):
        levels.append(level)
        root.setLevel(level)

    monkeypatch.setattr(
        "sudoku_solver.__main__.main_only_quicksetup_rootlogger", quicksetup)
    yield levels
    root.setLevel(saved)


def test_solves_puzzle_file(tmp_path, capsys, classic_text):
    path = tmp_path / "puzzle.txt"
    path.write_text(classic_text)

    assert main([str(path)]) == EXIT_SOLVED

    out = capsys.readouterr().out
    assert "Searching for a solution!" in out
    assert "Found a solution" in out
    assert "| 5 3 4 | 6 7 8 | 9 1 2 |" in out
    assert "| 3 4 5 | 2 8 6 | 1 7 9 |" in out


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0 0 0 0\n" * 4))
    assert main(["--box-size", "2"]) == EXIT_SOLVED
    assert "| 1 2 | 3 4 |" in capsys.readouterr().out


def test_unsolvable_puzzle(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin", io.StringIO("1 1 0 0\n0 0 0 0\n0 0 0 0\n0 0 0 0\n")
    )
    assert main([]) == EXIT_UNSOLVABLE
    assert "No Possible Solution Found!" in capsys.readouterr().out


def test_malformed_input(monkeypatch, caplog):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 x 4\n" * 4))
    assert main([]) == EXIT_BAD_INPUT
    assert "Could not read puzzle" in caplog.text


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.txt")]) == EXIT_BAD_INPUT


def test_bad_box_size(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["--box-size", "0"]) == EXIT_BAD_INPUT


def test_verbose_logs_search_at_debug(tmp_path, caplog, root_log_levels,
                                      classic_text):
    path = tmp_path / "puzzle.txt"
    path.write_text(classic_text)

    assert main(["--verbose", str(path)]) == EXIT_SOLVED

    assert root_log_levels == [logging.DEBUG]
    finished = [
        rec for rec in caplog.records
        if rec.name == "sudoku_solver.solver"
        and rec.getMessage().startswith("Search finished: solved")
    ]
    assert len(finished) == 1
    assert finished[0].levelno == logging.DEBUG
    assert "Solving:" in caplog.text


def test_search_not_logged_without_verbose(tmp_path, caplog, root_log_levels,
                                           classic_text):
    path = tmp_path / "puzzle.txt"
    path.write_text(classic_text)

    assert main([str(path)]) == EXIT_SOLVED

    assert root_log_levels == [logging.INFO]
    assert "Search finished" not in caplog.text
    assert "Solving:" in caplog.text
