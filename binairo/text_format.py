from typing import Iterable

from .cell import Cell
from .errors import ParseError
from .grid import Grid


def parse_grid(lines: Iterable[str]) -> Grid:
    """Build a grid from text rows.

    Blank lines are dropped, the widest line sets the width and shorter rows are
    padded with empty cells on the right.
    """
    rows = [line.rstrip("\r\n") for line in lines]
    rows = [row for row in rows if row]
    height = len(rows)
    width = max((len(row) for row in rows), default=0)
    if width == 0 or height == 0:
        raise ParseError(f"Invalid board size: {width}x{height}")

    columns = [[Cell.EMPTY for _ in range(height)] for _ in range(width)]
    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            try:
                columns[x][y] = Cell.from_symbol(symbol)
            except ValueError as exc:
                raise ParseError(f"Unexpected symbol at {x},{y}: {symbol!r}") from exc

    return Grid.from_cells(columns)


def parse_text(text: str) -> Grid:
    return parse_grid(text.split("\n"))


def format_grid(grid: Grid) -> str:
    return grid.serialize()
