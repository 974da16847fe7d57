"""Top-level deduction interface.

Expose `deduce_puzzle(puzzle)` that accepts either a pre-built Puzzle or a raw
puzzle dictionary compatible with `src.nonogram.parser.parse_puzzle`.
"""

from typing import Any, Tuple

from src.nonogram import deduction
from src.nonogram.parser import parse_puzzle
from src.nonogram.puzzle import Puzzle


def deduce_puzzle(puzzle: Any) -> Tuple[Puzzle, int]:
    """
    Fill every cell the overlap rule can determine.
    Returns the puzzle and the number of cells that became FILLED.
    Accepts:
      - Puzzle instances (mutated in place)
      - Raw puzzle dictionaries (parsed via `parse_puzzle`)
    """
    if isinstance(puzzle, Puzzle):
        target = puzzle
    elif isinstance(puzzle, dict):
        target = parse_puzzle(puzzle)
    else:
        raise TypeError("deduce_puzzle expects a Puzzle instance or puzzle dictionary")

    filled = deduction.apply_obvious_fills(target)
    return target, filled


__all__ = ["deduce_puzzle"]
