from .cell import Cell
from .grid import Grid
from .types import Axis


def find_violations(grid: Grid) -> list[str]:
    """Lists every Binairo rule broken by the committed cells of ``grid``."""
    violations: list[str] = []
    for axis in ("row", "column"):
        violations.extend(_adjacent_triples(grid, axis))
        violations.extend(_unbalanced_lines(grid, axis))
        violations.extend(_duplicate_lines(grid, axis))
    return violations


def is_valid_solution(grid: Grid) -> bool:
    return grid.is_complete() and not find_violations(grid)


def _line_values(grid: Grid, axis: Axis) -> list[list[Cell]]:
    return [[grid.get(x, y) for x, y in line] for line in grid.line_coordinates(axis)]


def _adjacent_triples(grid: Grid, axis: Axis) -> list[str]:
    violations: list[str] = []
    for index, values in enumerate(_line_values(grid, axis)):
        for start in range(len(values) - 2):
            value = values[start]
            if value is not Cell.EMPTY and value is values[start + 1] is values[start + 2]:
                violations.append(f"{axis} {index} has three adjacent '{value.symbol}' starting at {start}")
    return violations


def _unbalanced_lines(grid: Grid, axis: Axis) -> list[str]:
    violations: list[str] = []
    for index, values in enumerate(_line_values(grid, axis)):
        limit = (len(values) + 1) // 2
        for value in (Cell.ZERO, Cell.ONE):
            count = values.count(value)
            if count > limit:
                violations.append(f"{axis} {index} has {count} '{value.symbol}' but at most {limit} fit")
    return violations


def _duplicate_lines(grid: Grid, axis: Axis) -> list[str]:
    violations: list[str] = []
    seen: dict[tuple[Cell, ...], int] = {}
    for index, values in enumerate(_line_values(grid, axis)):
        if Cell.EMPTY in values:
            continue
        key = tuple(values)
        if key in seen:
            violations.append(f"{axis} {index} repeats {axis} {seen[key]}")
        else:
            seen[key] = index
    return violations
