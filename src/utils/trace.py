"""Tracing module: logs deduction steps on a puzzle and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the deduction process."""

    timestamp: float
    step_number: int
    action_type: str  # 'cell_set', 'obvious_fill', 'solved_check'
    line: Optional[str] = None  # Line label such as "col 2" or "row 0"
    index: Optional[int] = None
    state: Optional[str] = None
    cells_filled: Optional[int] = None
    is_solved: Optional[bool] = None
    reason: Optional[str] = None


class Tracer:
    """Records deduction steps for logging and analysis."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        self.step_counter += 1
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            **fields,
        ))

    def log_cell_set(self, line: str, index: int, state: str):
        """Log a single cell changed by a deduction."""
        if not self.enabled:
            return
        self._record('cell_set', line=line, index=index, state=state)

    def log_obvious_fill(self, line: str, cells_filled: int):
        """Log a line on which the overlap rule filled new cells."""
        if not self.enabled:
            return
        self._record(
            'obvious_fill',
            line=line,
            cells_filled=cells_filled,
            reason=f"Filled {cells_filled} cells common to both packings",
        )

    def log_solved_check(self, is_solved: bool, reason: str = ""):
        """Log the result of checking the grid against every hint."""
        if not self.enabled:
            return
        self._record('solved_check', is_solved=is_solved, reason=reason or None)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'line', 'index',
            'state', 'cells_filled', 'is_solved', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_cells_filled': sum(s.cells_filled or 0 for s in self.steps if s.action_type == 'obvious_fill'),
            'num_lines_filled': action_counts.get('obvious_fill', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
