import logging
from typing import Optional

from .cell import Cell
from .errors import Contradiction, NoEmptyCellError
from .grid import Grid
from .results import Failure, SolveOutcome, Solved
from .rules import checked_update, solve_simple_rules
from .types import OptionalCoordinate
from .utils import SolveTrace, trace


logger = logging.getLogger(__name__)


def solve_impl(grid: Grid, tracer: Optional[SolveTrace] = None, depth: int = 0) -> SolveOutcome:
    """Propagates the simple rules to a fixpoint, guessing once they stall.

    The input grid is never mutated: every pass works on a fresh copy.
    """
    current = grid
    while True:
        try:
            updated = solve_simple_rules(current.copy(), tracer, depth)
        except Contradiction as exc:
            logger.debug("Contradiction at depth %d: %s", depth, exc)
            trace(tracer, "contradiction", f"Got stuck in basic rule: {exc}", depth, grid=current, x=exc.x, y=exc.y)
            return Failure(f"Got stuck in basic rule: {exc}", cause=exc)

        if updated == current:
            if current.is_complete():
                trace(tracer, "solved", "Grid complete", depth, grid=current)
                return Solved(current)
            trace(
                tracer,
                "stall",
                f"Rules stalled with {current.empty_count()} empty cells; guessing",
                depth,
                grid=current,
            )
            return find_guess(current, tracer, depth)

        trace(tracer, "propagate", f"Pass left {updated.empty_count()} empty cells", depth, grid=updated)
        if updated.is_complete():
            trace(tracer, "solved", "Grid complete", depth, grid=updated)
            return Solved(updated)
        current = updated


def first_empty_cell(grid: Grid) -> OptionalCoordinate:
    for x in range(grid.width):
        for y in range(grid.height):
            if grid.get(x, y) is Cell.EMPTY:
                return x, y
    return None


def find_guess(grid: Grid, tracer: Optional[SolveTrace] = None, depth: int = 0) -> SolveOutcome:
    cell = first_empty_cell(grid)
    if cell is None:
        return Failure("Cannot guess on a complete grid", cause=NoEmptyCellError("grid has no empty cell"))

    x, y = cell
    zero_outcome = guess_solve(grid, x, y, Cell.ZERO, tracer, depth)
    if isinstance(zero_outcome, Solved):
        return zero_outcome

    one_outcome = guess_solve(grid, x, y, Cell.ONE, tracer, depth)
    if isinstance(one_outcome, Solved):
        return one_outcome

    return Failure(f"No valid value for ({x},{y})", cause=zero_outcome, secondary_cause=one_outcome)


def guess_solve(
    grid: Grid,
    x: int,
    y: int,
    guess: Cell,
    tracer: Optional[SolveTrace] = None,
    depth: int = 0,
) -> SolveOutcome:
    """Tries ``guess`` at (x, y) on a private copy, then its inverse on that same copy."""
    branch = grid.copy()

    first = _attempt(branch, x, y, guess, tracer, depth)
    if isinstance(first, Solved):
        return first

    trace(tracer, "backtrack", f"Backtrack on ({x}, {y}) value {guess.symbol}", depth, grid=grid, x=x, y=y, value=guess)
    second = _attempt(branch, x, y, guess.invert(), tracer, depth)
    if isinstance(second, Solved):
        return second

    return Failure(f"No valid move for ({x},{y})", cause=first, secondary_cause=second)


def _attempt(branch: Grid, x: int, y: int, value: Cell, tracer: Optional[SolveTrace], depth: int) -> SolveOutcome:
    logger.debug("Guess %s at (%d, %d), depth %d", value.symbol, x, y, depth)
    trace(tracer, "guess", f"Guess {value.symbol} at ({x}, {y})", depth, grid=branch, x=x, y=y, value=value)
    try:
        checked_update(branch, x, y, value, tracer, "guess", depth)
    except Contradiction as exc:
        trace(tracer, "contradiction", f"Guess refused: {exc}", depth, grid=branch, x=x, y=y, value=value)
        return Failure(f"Guess refused: {exc}", cause=exc)
    return solve_impl(branch, tracer, depth + 1)
