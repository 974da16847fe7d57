"""Lines (columns and rows of cells) and the puzzle aggregate."""

from typing import List, Optional, Sequence

from .model import Block, Cell, Grid, Hint, InvalidDimensionsError, State


class Line:
    """
    A column or row of cells together with the hint that restricts it.

    The line observes its cells: any state change on one of them recomputes
    `blocks` before `Cell.set_state` returns.
    """

    def __init__(self, hint: Hint, cells: Sequence[Cell], label: str = "") -> None:
        self.hint = hint
        self.cells: List[Cell] = list(cells)
        self.label = label
        self.blocks: List[Block] = []
        for cell in self.cells:
            cell.add_observer(self)
        self.update()

    def update(self) -> None:
        """Recompute the blocks of FILLED cells from scratch."""
        block_size = 0
        block_start = 0
        blocks: List[Block] = []
        last_state = State.EMPTY
        for index, cell in enumerate(self.cells):
            if last_state != State.FILLED:
                if cell.state == State.FILLED:
                    block_size = 1
                    block_start = index
            else:
                if cell.state == State.FILLED:
                    block_size += 1
                else:
                    blocks.append(Block(block_start, block_size))
                    block_size = 0
            last_state = cell.state
        if block_size > 0:
            blocks.append(Block(block_start, block_size))
        self.blocks = blocks

    def block_sizes(self) -> List[int]:
        return [block.size for block in self.blocks]

    def block_starts(self) -> List[int]:
        return [block.start_index for block in self.blocks]

    def contains(self, state: State) -> bool:
        return any(cell.state == state for cell in self.cells)

    def is_satisfied(self) -> bool:
        return self.block_sizes() == list(self.hint.values)

    def fill_obvious(self) -> List[int]:
        """
        Fill the cells covered by the same run in both the leftmost and the
        rightmost packing of the hint. Returns the indices that were set.

        Only ever marks cells FILLED; a hint that does not fit in the line
        leaves it untouched.
        """
        length = len(self.cells)
        if not self.hint.values or self.hint.size > length:
            return []

        core: List[int] = []
        for run, value in enumerate(self.hint.values):
            if run > 0:
                core.append(0)
            core.extend([run + 1] * value)
        padding = [0] * (length - len(core))
        front = core + padding
        back = padding + core

        filled = [
            index
            for index in range(length)
            if front[index] != 0 and front[index] == back[index]
        ]
        for index in filled:
            self.cells[index].set_state(State.FILLED)
        return filled

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"Line index {index} out of range for length {len(self.cells)}")

    def __getitem__(self, index: int) -> Cell:
        self._check_index(index)
        return self.cells[index]

    def __setitem__(self, index: int, state: State) -> None:
        self._check_index(index)
        self.cells[index].set_state(state)

    def __len__(self) -> int:
        return len(self.cells)

    def __repr__(self) -> str:
        return f"Line({self.label or '?'}, hint={list(self.hint.values)}, blocks={self.block_sizes()})"


class Puzzle:
    """
    Column hints (left to right), row hints (top to bottom) and the grid they
    constrain. Lines are built once, columns first then rows, and kept sorted
    by descending hint size; ties keep that construction order.
    """

    def __init__(
        self,
        col_hints: Sequence[Hint],
        row_hints: Sequence[Hint],
        grid: Optional[Grid] = None,
    ) -> None:
        self.col_hints: List[Hint] = list(col_hints)
        self.row_hints: List[Hint] = list(row_hints)
        self.num_cols = len(self.col_hints)
        self.num_rows = len(self.row_hints)
        if grid is None:
            grid = Grid(self.num_cols, self.num_rows)
        elif grid.num_cols != self.num_cols or grid.num_rows != self.num_rows:
            raise InvalidDimensionsError(
                f"Grid is {grid.num_cols}x{grid.num_rows} but hints describe "
                f"{self.num_cols}x{self.num_rows}"
            )
        self.grid = grid

        self._columns = [
            Line(hint, grid.column(col), label=f"col {col}")
            for col, hint in enumerate(self.col_hints)
        ]
        self._rows = [
            Line(hint, grid.row(row), label=f"row {row}")
            for row, hint in enumerate(self.row_hints)
        ]
        # sorted() is stable, including with reverse=True
        self.lines: List[Line] = sorted(
            self._columns + self._rows, key=lambda line: line.hint.size, reverse=True
        )

    def column(self, col: int) -> Line:
        return self._columns[col]

    def row(self, row: int) -> Line:
        return self._rows[row]

    def is_solved(self) -> bool:
        """Check whether the current grid satisfies every hint."""
        for line in self.lines:
            if not line.is_satisfied():
                return False
        return True
