"""Puzzle parser: convert a raw puzzle record into a `Puzzle`.

A record carries column and row hints, either as lists of integers or as
strings such as "2 1" / "2,1". An empty entry, or a lone 0, is an empty hint.
Optional `grid` and `solution` entries are lists of row strings in the
rendering alphabet (`_`, `O`, `X`).
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from .model import GridState, Hint
from .puzzle import Puzzle
from .render import parse_rows

_COL_KEYS = ("col_hints", "columns", "cols")
_ROW_KEYS = ("row_hints", "rows")


def parse_puzzle(record: Dict[str, Any]) -> Puzzle:
    col_hints = _parse_hints(_first_present(record, _COL_KEYS), "column")
    row_hints = _parse_hints(_first_present(record, _ROW_KEYS), "row")
    puzzle = Puzzle(col_hints, row_hints)

    grid_rows = _parse_row_strings(record.get("grid"))
    if grid_rows:
        puzzle.grid.apply_state(parse_rows(grid_rows))
    return puzzle


def parse_solution(record: Dict[str, Any]) -> Optional[GridState]:
    rows = _parse_row_strings(record.get("solution"))
    if not rows:
        return None
    return parse_rows(rows)


def parse_hint(raw: Any) -> Hint:
    if raw is None:
        return Hint(())
    if isinstance(raw, str):
        tokens = [token for token in re.split(r"[\s,]+", raw.strip()) if token]
        values = [_parse_run(token) for token in tokens]
    elif isinstance(raw, int):
        values = [raw]
    else:
        values = list(raw)
    # Puzzle files commonly write an empty line as a single 0.
    if values == [0]:
        values = []
    return Hint(values)


def _parse_run(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"Hint run length must be an integer, got {token!r}") from None


def _parse_hints(raw: Any, kind: str) -> List[Hint]:
    if raw is None:
        raise ValueError(f"Puzzle record has no {kind} hints")
    if isinstance(raw, str):
        raw = re.split(r"[/;\n]", raw)
    return [parse_hint(entry) for entry in raw]


def _parse_row_strings(raw: Any) -> List[str]:
    if not raw:
        return []
    if isinstance(raw, str):
        return [line.strip() for line in raw.splitlines() if line.strip()]
    return [str(line).strip() for line in raw]


def _first_present(record: Dict[str, Any], keys) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None
