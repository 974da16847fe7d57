"""Nonogram model: grid, hints, lines, and the overlap deduction rule."""

from .model import (
    Block,
    Cell,
    Grid,
    Hint,
    InvalidDimensionsError,
    InvalidHintError,
    State,
    compare_hints,
)
from .puzzle import Line, Puzzle
from .deduction import apply_obvious_fills, check_solved
from .parser import parse_puzzle
from .render import render_grid

__all__ = [
    "Block",
    "Cell",
    "Grid",
    "Hint",
    "InvalidDimensionsError",
    "InvalidHintError",
    "State",
    "compare_hints",
    "Line",
    "Puzzle",
    "apply_obvious_fills",
    "check_solved",
    "parse_puzzle",
    "render_grid",
]
