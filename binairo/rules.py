from typing import Optional

from .cell import Cell
from .errors import Contradiction
from .grid import AXES, Grid
from .types import Axis, Line
from .utils import SolveTrace, trace


def checked_update(
    grid: Grid,
    x: int,
    y: int,
    value: Cell,
    tracer: Optional[SolveTrace] = None,
    reason: str = "",
    depth: int = 0,
) -> Grid:
    """Commit ``value`` at (x, y) unless it clashes with the committed value.

    Coordinates outside the grid are ignored so rules can probe the neighbours
    of edge cells without their own bounds checks.
    """
    if not grid.in_bounds(x, y):
        return grid

    current = grid.get(x, y)
    if current is value:
        return grid
    if current is not Cell.EMPTY:
        raise Contradiction(x, y, current, value)

    grid.set(x, y, value)
    trace(tracer, "deduce", f"Set ({x}, {y}) to {value.symbol} ({reason})", depth, grid=grid, x=x, y=y, value=value)
    return grid


def fill_remaining(
    grid: Grid,
    line: Line,
    value: Cell,
    tracer: Optional[SolveTrace] = None,
    reason: str = "",
    depth: int = 0,
) -> Grid:
    for x, y in line:
        if grid.get(x, y) is Cell.EMPTY:
            checked_update(grid, x, y, value, tracer, reason, depth)
    return grid


def solve_double_rule(grid: Grid, axis: Axis, tracer: Optional[SolveTrace] = None, depth: int = 0) -> Grid:
    """Fills _11_ and _00_ patterns along every line of ``axis``."""
    dx, dy = AXES[axis]
    reason = f"double rule per {axis}"
    for line in grid.line_coordinates(axis):
        for (x, y), (next_x, next_y) in zip(line, line[1:]):
            value = grid.get(x, y)
            if value is Cell.EMPTY or value is not grid.get(next_x, next_y):
                continue
            inverse = value.invert()
            checked_update(grid, x - dx, y - dy, inverse, tracer, reason, depth)
            checked_update(grid, next_x + dx, next_y + dy, inverse, tracer, reason, depth)
    return grid


def solve_gap_rule(grid: Grid, axis: Axis, tracer: Optional[SolveTrace] = None, depth: int = 0) -> Grid:
    """Fills 1_1 and 0_0 patterns along every line of ``axis``."""
    reason = f"gap rule per {axis}"
    for line in grid.line_coordinates(axis):
        for before, (x, y), after in zip(line, line[1:], line[2:]):
            if grid.get(x, y) is not Cell.EMPTY:
                continue
            neighbour = grid.get(*before)
            if neighbour is Cell.EMPTY or neighbour is not grid.get(*after):
                continue
            checked_update(grid, x, y, neighbour.invert(), tracer, reason, depth)
    return grid


def solve_value_count(grid: Grid, axis: Axis, tracer: Optional[SolveTrace] = None, depth: int = 0) -> Grid:
    """Completes lines where one value already fills half of the line."""
    reason = f"value count per {axis}"
    for line in grid.line_coordinates(axis):
        values = [grid.get(x, y) for x, y in line]
        zeros = values.count(Cell.ZERO)
        ones = values.count(Cell.ONE)
        if 2 * zeros >= len(line):
            grid = fill_remaining(grid, line, Cell.ONE, tracer, reason, depth)
        elif 2 * ones >= len(line):
            grid = fill_remaining(grid, line, Cell.ZERO, tracer, reason, depth)
    return grid


SIMPLE_RULES = (
    (solve_double_rule, "column"),
    (solve_double_rule, "row"),
    (solve_gap_rule, "column"),
    (solve_gap_rule, "row"),
    (solve_value_count, "column"),
    (solve_value_count, "row"),
)


def solve_simple_rules(grid: Grid, tracer: Optional[SolveTrace] = None, depth: int = 0) -> Grid:
    """Runs one propagation pass.

    Raises Contradiction as soon as a rule clashes with a committed cell; the
    rules after it are skipped.
    """
    result = grid
    for rule, axis in SIMPLE_RULES:
        result = rule(result, axis, tracer, depth)
    return result
