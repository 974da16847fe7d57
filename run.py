"""CLI entrypoint: load nonogram puzzle(s), apply the overlap rule, and report status."""

import argparse
import csv
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from deduce import deduce_puzzle
from src.nonogram.deduction import check_solved
from src.nonogram.loader import load_puzzles
from src.nonogram.model import Grid
from src.nonogram.parser import parse_puzzle, parse_solution
from src.nonogram.puzzle import Puzzle
from src.nonogram.render import render_grid
from src.utils.trace import get_tracer, reset_tracer

DATA_PATH_ENV = "NONOGRAM_DATA_PATH"
PUZZLE_SUFFIXES = [".json", ".jsonl", ".parquet"]


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Apply the overlap rule to nonogram puzzles")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help=f"Path to puzzle file or directory of puzzles (default: ${DATA_PATH_ENV})",
    )
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write results CSV")
    parser.add_argument("--trace-dir", type=Path, default=None, help="Optional directory for per-puzzle trace CSVs")
    parser.add_argument(
        "--no-deduce",
        action="store_true",
        help="Only check the given grid; do not apply the overlap rule.",
    )
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    args = parser.parse_args(argv)

    if args.input is None:
        env_path = os.environ.get(DATA_PATH_ENV)
        if not env_path:
            parser.error(f"either an input path must be given or ${DATA_PATH_ENV} set")
        args.input = Path(env_path)
    return args


def verify_solution(puzzle: Puzzle, record: Dict[str, Any]) -> Optional[bool]:
    """Check a record's `solution` rows against the puzzle's hints on a fresh grid."""
    solution = parse_solution(record)
    if solution is None:
        return None
    grid = Grid(puzzle.num_cols, puzzle.num_rows)
    grid.apply_state(solution)
    return Puzzle(puzzle.col_hints, puzzle.row_hints, grid).is_solved()


def process_puzzle(record: Dict[str, Any], deduce: bool = True) -> Dict[str, Any]:
    puzzle = parse_puzzle(record)
    steps = 0
    if deduce:
        _, steps = deduce_puzzle(puzzle)
    solved = check_solved(puzzle)
    return {
        "id": record.get("id", "unknown"),
        "grid": render_grid(puzzle.grid),
        "solved": solved,
        "solution_valid": verify_solution(puzzle, record),
        "steps": steps,
    }


def trace_file_stem(puzzle_id: Any) -> str:
    """Make a puzzle id safe to use as a file name inside the trace directory."""
    stem = re.sub(r"[^\w.-]", "_", str(puzzle_id)).strip(".")
    return stem or "puzzle"


def collect_puzzles(input_path: Path) -> List[Dict[str, Any]]:
    if input_path.is_file():
        return load_puzzles(str(input_path))
    if input_path.is_dir():
        puzzles = []
        for file_path in sorted(input_path.iterdir()):
            if file_path.suffix in PUZZLE_SUFFIXES:
                try:
                    puzzles.extend(load_puzzles(str(file_path)))
                except Exception as e:
                    print(f"ERROR: Failed to load {file_path}: {e}")
        return puzzles
    raise ValueError(f"Input path {input_path} is neither file nor directory")


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "grid", "solved", "solution_valid", "steps"])

        for r in results:
            writer.writerow([
                r["id"],
                r["grid"],
                r["solved"],
                "" if r["solution_valid"] is None else r["solution_valid"],
                r["steps"],
            ])


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    puzzles = collect_puzzles(args.input)
    results = []

    iterator = puzzles
    if args.progress:
        iterator = tqdm(puzzles, desc="Deducing", unit="puzzle")

    for idx, record in enumerate(iterator):
        reset_tracer()
        puzzle_id = record.get("id", f"row_{idx}")

        try:
            results.append(process_puzzle(record, deduce=not args.no_deduce))
        except Exception as e:
            print(f"ERROR: Failed to process puzzle {puzzle_id}: {e}")
            results.append({
                "id": puzzle_id,
                "grid": "",
                "solved": False,
                "solution_valid": None,
                "steps": -1,
            })

        if args.trace_dir:
            get_tracer().to_csv(args.trace_dir / f"{trace_file_stem(puzzle_id)}.csv")

    if args.output:
        write_results_csv(results, args.output)
    else:
        for r in results:
            status = "solved" if r["solved"] else "unsolved"
            print(f"{r['id']}: {status} ({r['steps']} cells filled)")
            print(r["grid"], end="")

    return results


if __name__ == "__main__":
    main()
