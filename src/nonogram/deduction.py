"""Whole-puzzle sweep of the overlap ("obvious fill") rule.

This is a single pass of one local rule, not a solver: it never marks a cell
EMPTY and never searches.
"""

from typing import Optional

from .model import State
from .puzzle import Line, Puzzle
from src.utils.trace import Tracer, get_tracer


def apply_obvious_fills(puzzle: Puzzle, tracer: Optional[Tracer] = None) -> int:
    """
    Apply `Line.fill_obvious` to every line, in `puzzle.lines` order.
    Returns the number of cells that became FILLED.
    """
    tracer = tracer or get_tracer()
    total = 0
    for line in puzzle.lines:
        total += _fill_line(line, tracer)
    return total


def check_solved(puzzle: Puzzle, tracer: Optional[Tracer] = None) -> bool:
    tracer = tracer or get_tracer()
    solved = puzzle.is_solved()
    unknown = puzzle.grid.count(State.UNKNOWN)
    tracer.log_solved_check(is_solved=solved, reason=f"{unknown} cells still unknown")
    return solved


def _fill_line(line: Line, tracer: Tracer) -> int:
    before = [cell.state for cell in line.cells]
    changed = 0
    for index in line.fill_obvious():
        if before[index] != State.FILLED:
            changed += 1
            tracer.log_cell_set(line.label, index, State.FILLED.name)
    if changed:
        tracer.log_obvious_fill(line.label, cells_filled=changed)
    return changed
