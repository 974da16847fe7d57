import pytest

from src.nonogram.model import Hint, InvalidHintError, State
from src.nonogram.parser import parse_hint, parse_puzzle, parse_solution


def test_parse_hint_formats():
    assert parse_hint([2, 1]) == Hint([2, 1])
    assert parse_hint("2 1") == Hint([2, 1])
    assert parse_hint("2,1") == Hint([2, 1])
    assert parse_hint(3) == Hint([3])


@pytest.mark.parametrize("raw", [[], "", "0", [0], None])
def test_parse_hint_empty_forms(raw):
    assert parse_hint(raw) == Hint([])


def test_parse_hint_rejects_malformed_tokens():
    with pytest.raises(ValueError):
        parse_hint("2.5")
    with pytest.raises(ValueError):
        parse_hint("x")
    with pytest.raises(InvalidHintError):
        parse_hint([2.5])


def test_parse_hint_blank_string_is_empty():
    assert parse_hint("  ") == Hint([])
    assert parse_hint(" 3 , 1 ") == Hint([3, 1])


def test_parse_hint_rejects_non_positive_runs():
    with pytest.raises(InvalidHintError):
        parse_hint("2 0 1")
    with pytest.raises(InvalidHintError):
        parse_hint("-1")


def test_parse_puzzle_with_aliases_and_initial_grid():
    record = {
        "id": "tiny",
        "columns": "1/2",
        "rows": [[1], [2]],
        "grid": ["_O", "__"],
    }
    puzzle = parse_puzzle(record)
    assert puzzle.num_cols == 2
    assert puzzle.num_rows == 2
    assert puzzle.col_hints == [Hint([1]), Hint([2])]
    assert puzzle.grid[1, 0].state == State.EMPTY
    assert puzzle.row(0).contains(State.EMPTY)


def test_parse_puzzle_requires_hints():
    with pytest.raises(ValueError):
        parse_puzzle({"row_hints": [[1]]})


def test_parse_solution():
    assert parse_solution({}) is None
    solution = parse_solution({"solution": "XO\nOX\n"})
    assert solution[(0, 0)] == State.FILLED
    assert solution[(1, 1)] == State.FILLED
    assert solution[(1, 0)] == State.EMPTY
