import argparse
import json
import logging
from pathlib import Path
from typing import Any, Optional

from binairo.grid import Grid
from binairo.logging_config import setup_logging
from binairo.results import Solved
from binairo.solver import solve, solve_with_outcome
from binairo.text_format import parse_grid
from binairo.utils import SolveTrace
from binairo.validation import find_violations


FAILURE_MAX_LINES = 200


def run(lines: list[str]) -> Grid:
    return solve(parse_grid(lines))


def run_with_trace(lines: list[str]) -> tuple[Grid, list[str]]:
    trace_log: list[str] = []
    result = solve(parse_grid(lines), SolveTrace(trace_log=trace_log))
    return result, trace_log


def load_puzzle_from_file(input_path: str) -> Grid:
    path = Path(input_path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ValueError(f"input file not found: {input_path}") from exc

    return parse_grid(text.splitlines())


def write_solution(output_path: str, rows: list[str]) -> None:
    Path(output_path).write_text("".join(f"{row}\n" for row in rows), encoding="utf-8")


def build_report(puzzle: Grid, trace: bool = False, failure_max_lines: int = FAILURE_MAX_LINES) -> dict[str, Any]:
    trace_log: Optional[list[str]] = [] if trace else None
    outcome = solve_with_outcome(puzzle, SolveTrace(trace_log=trace_log) if trace else None)
    result = outcome.grid if isinstance(outcome, Solved) else puzzle
    if trace_log is not None and not isinstance(outcome, Solved):
        trace_log.extend(outcome.describe(failure_max_lines))

    report: dict[str, Any] = {
        "solved": isinstance(outcome, Solved),
        "complete": result.is_complete(),
        "solution": result.rows(),
        "violations": find_violations(result),
    }
    if trace_log is not None:
        report["trace"] = trace_log
    return report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a Binairo puzzle from a text file")
    parser.add_argument("--input", required=True, help="Path to a text file with one puzzle row per line")
    parser.add_argument("--output", help="Write the resulting grid to this path")
    parser.add_argument("--trace", action="store_true", help="Include solver trace output")
    parser.add_argument(
        "--failure-lines",
        type=int,
        default=FAILURE_MAX_LINES,
        help="Maximum number of failure report lines added to the trace",
    )
    parser.add_argument("--debug", action="store_true", help="Log solver decisions to stderr")
    return parser


if __name__ == "__main__":
    args = _build_parser().parse_args()
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)

    try:
        puzzle = load_puzzle_from_file(args.input)
        report = build_report(puzzle, trace=args.trace, failure_max_lines=args.failure_lines)
        print(json.dumps(report, indent=2))
        if args.output:
            write_solution(args.output, report["solution"])
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}")
