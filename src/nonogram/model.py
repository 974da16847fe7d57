"""Nonogram core data structures: cell states, hints, blocks and the grid."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Protocol, Tuple


class InvalidDimensionsError(ValueError):
    """Raised when a grid is built with a non-positive column or row count."""


class InvalidHintError(ValueError):
    """Raised when a hint contains a run length that is not an integer of at least 1."""


class State(Enum):
    UNKNOWN = "unknown"
    EMPTY = "empty"
    FILLED = "filled"


Location = Tuple[int, int]
GridState = Dict[Location, State]


class CellObserver(Protocol):
    def update(self) -> None:
        ...


class Cell:
    """
    A single grid position. Every call to `set_state` notifies the registered
    observers, in registration order, even when the state does not change.
    """

    def __init__(self) -> None:
        self._state = State.UNKNOWN
        # dict keys act as an insertion-ordered set
        self._observers: Dict[CellObserver, None] = {}

    @property
    def state(self) -> State:
        return self._state

    @state.setter
    def state(self, new_state: State) -> None:
        self.set_state(new_state)

    @property
    def observers(self) -> List[CellObserver]:
        return list(self._observers)

    def set_state(self, new_state: State) -> None:
        self._state = new_state
        for observer in list(self._observers):
            observer.update()

    def add_observer(self, observer: CellObserver) -> None:
        self._observers.setdefault(observer, None)

    def __repr__(self) -> str:
        return f"Cell({self._state.name})"


@dataclass(frozen=True)
class Block:
    """A maximal run of FILLED cells inside a line."""

    start_index: int
    size: int


@dataclass(frozen=True)
class Hint:
    """
    The run lengths required in one column or row.
    `size` is the minimum span needed to lay the runs out with one gap between
    consecutive runs. Ordering compares `size` only; equality compares values.
    """

    values: Tuple[int, ...]
    size: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        values = tuple(_run_length(v) for v in self.values)
        for value in values:
            if value < 1:
                raise InvalidHintError(f"Hint values must be positive, got {list(values)}")
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "size", sum(values) + max(0, len(values) - 1))

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self.values):
            raise IndexError(f"Hint index {index} out of range for {list(self.values)}")
        return self.values[index]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __lt__(self, other: "Hint") -> bool:
        if not isinstance(other, Hint):
            return NotImplemented
        return self.size < other.size

    def __le__(self, other: "Hint") -> bool:
        if not isinstance(other, Hint):
            return NotImplemented
        return self.size <= other.size

    def __gt__(self, other: "Hint") -> bool:
        if not isinstance(other, Hint):
            return NotImplemented
        return self.size > other.size

    def __ge__(self, other: "Hint") -> bool:
        if not isinstance(other, Hint):
            return NotImplemented
        return self.size >= other.size


def _run_length(value) -> int:
    if isinstance(value, bool):
        raise InvalidHintError(f"Hint values must be integers, got {value!r}")
    try:
        length = int(value)
    except (TypeError, ValueError):
        raise InvalidHintError(f"Hint values must be integers, got {value!r}") from None
    if length != value:
        raise InvalidHintError(f"Hint values must be integers, got {value!r}")
    return length


def compare_hints(a: Hint, b: Hint) -> int:
    """Negative, zero or positive as `a` is smaller than, as large as, or larger than `b`."""
    return a.size - b.size


class Grid:
    """
    The rectangular collection of cells for one puzzle, addressed by
    (column, row). Out-of-range lookups return None and out-of-range writes
    are ignored.
    """

    def __init__(self, num_cols: int, num_rows: int) -> None:
        if num_cols <= 0 or num_rows <= 0:
            raise InvalidDimensionsError(
                f"Grid dimensions must be positive, got {num_cols}x{num_rows}"
            )
        self.num_cols = num_cols
        self.num_rows = num_rows
        self.cells: Dict[Location, Cell] = {
            (col, row): Cell() for col in range(num_cols) for row in range(num_rows)
        }

    def at(self, col: int, row: int) -> Optional[Cell]:
        return self.cells.get((col, row))

    def set(self, col: int, row: int, state: State) -> None:
        cell = self.cells.get((col, row))
        if cell is not None:
            cell.set_state(state)

    def __getitem__(self, location: Location) -> Optional[Cell]:
        return self.cells.get(location)

    def __setitem__(self, location: Location, state: State) -> None:
        col, row = location
        self.set(col, row, state)

    def column(self, col: int) -> List[Cell]:
        return [self.cells[(col, row)] for row in range(self.num_rows)]

    def row(self, row: int) -> List[Cell]:
        return [self.cells[(col, row)] for col in range(self.num_cols)]

    def contains(self, state: State) -> bool:
        return any(cell.state == state for cell in self.cells.values())

    def count(self, state: State) -> int:
        return sum(1 for cell in self.cells.values() if cell.state == state)

    def same_states(self, other: "Grid") -> bool:
        """Deep comparison by the state of each cell; grids of different sizes never match."""
        if other.num_cols != self.num_cols or other.num_rows != self.num_rows:
            return False
        for location, cell in self.cells.items():
            if other.cells[location].state != cell.state:
                return False
        return True

    def export_state(self) -> GridState:
        return {location: cell.state for location, cell in self.cells.items()}

    def apply_state(self, grid_state: GridState) -> None:
        for location, state in grid_state.items():
            cell = self.cells.get(location)
            if cell is not None:
                cell.set_state(state)
