import json

import pandas as pd
import pytest

from src.nonogram.loader import load_puzzles
from src.nonogram.parser import parse_puzzle


def test_load_json_object_and_array(tmp_path):
    single = tmp_path / "one.json"
    single.write_text(json.dumps({"id": "a", "col_hints": [[1]], "row_hints": [[1]]}))
    many = tmp_path / "many.json"
    many.write_text(json.dumps([{"col_hints": [[1]], "row_hints": [[1]]}, "skip me", {"id": "c"}]))

    assert [p["id"] for p in load_puzzles(str(single))] == ["a"]
    assert [p["id"] for p in load_puzzles(str(many))] == ["row_0", "c"]


def test_load_jsonl_skips_blank_and_malformed_lines(tmp_path):
    path = tmp_path / "puzzles.jsonl"
    path.write_text(
        '{"id": "p1", "col_hints": ["1"], "row_hints": ["1"]}\n'
        "\n"
        "{broken\n"
        '{"id": "p2", "col_hints": ["2"], "row_hints": ["1", "1"]}\n'
    )
    puzzles = load_puzzles(str(path))
    assert [p["id"] for p in puzzles] == ["p1", "p2"]


def test_json_suffix_falls_back_to_line_delimited(tmp_path):
    path = tmp_path / "lines.json"
    path.write_text('{"id": "x"}\n{"id": "y"}\n')
    assert [p["id"] for p in load_puzzles(str(path))] == ["x", "y"]


def test_load_parquet_coerces_arrays(tmp_path):
    path = tmp_path / "puzzles.parquet"
    df = pd.DataFrame(
        {
            "id": ["pq"],
            "col_hints": [[[2], [2]]],
            "row_hints": [[[2], [2]]],
        }
    )
    df.to_parquet(path)

    puzzles = load_puzzles(str(path))
    assert puzzles[0]["col_hints"] == [[2], [2]]
    puzzle = parse_puzzle(puzzles[0])
    assert puzzle.num_cols == 2


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_puzzles(str(tmp_path / "nope.json"))
