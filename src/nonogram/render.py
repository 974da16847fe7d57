"""Text rendering of a grid: one line per row, `_` unknown, `O` empty, `X` filled."""

from typing import Dict, Iterable

from .model import Grid, GridState, State

STATE_CHARS: Dict[State, str] = {
    State.UNKNOWN: "_",
    State.EMPTY: "O",
    State.FILLED: "X",
}
CHAR_STATES: Dict[str, State] = {char: state for state, char in STATE_CHARS.items()}


def render_grid(grid: Grid) -> str:
    lines = []
    for row in range(grid.num_rows):
        chars = [STATE_CHARS[cell.state] for cell in grid.row(row)]
        lines.append("".join(chars) + "\n")
    return "".join(lines)


def parse_rows(rows: Iterable[str]) -> GridState:
    """Inverse of `render_grid`: map each character of each row to its (col, row) location."""
    grid_state: GridState = {}
    for row, text in enumerate(rows):
        for col, char in enumerate(text.rstrip("\r\n")):
            if char not in CHAR_STATES:
                raise ValueError(f"Unknown cell character {char!r} at column {col}, row {row}")
            grid_state[(col, row)] = CHAR_STATES[char]
    return grid_state
