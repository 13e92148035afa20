from typing import Optional

from .cell import Cell
from .errors import BoundsError
from .types import Axis, Coordinate, GridRows, Line


AXES: dict[Axis, Coordinate] = {
    "column": (0, 1),
    "row": (1, 0),
}


class Grid:
    """Mutable Binairo board addressed by zero-based (x, y), x being the column."""

    def __init__(self, width: int, height: int, columns: Optional[list[list[Cell]]] = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid board size: {width}x{height}")
        self._width = width
        self._height = height
        if columns is None:
            self._columns = [[Cell.EMPTY for _ in range(height)] for _ in range(width)]
            return

        if len(columns) != width or any(len(column) != height for column in columns):
            raise ValueError(f"columns must describe a {width}x{height} grid")
        self._columns = [list(column) for column in columns]

    @classmethod
    def from_cells(cls, columns: list[list[Cell]]) -> "Grid":
        if not columns or not columns[0]:
            raise ValueError("columns must contain at least one cell")
        return cls(len(columns), len(columns[0]), columns)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Cell:
        self._check_bounds(x, y)
        return self._columns[x][y]

    def set(self, x: int, y: int, value: Cell) -> None:
        self._check_bounds(x, y)
        self._columns[x][y] = value

    def is_complete(self) -> bool:
        return all(value is not Cell.EMPTY for column in self._columns for value in column)

    def empty_count(self) -> int:
        return sum(1 for column in self._columns for value in column if value is Cell.EMPTY)

    def copy(self) -> "Grid":
        return Grid(self._width, self._height, self._columns)

    def line_coordinates(self, axis: Axis) -> list[Line]:
        if axis == "column":
            return [[(x, y) for y in range(self._height)] for x in range(self._width)]
        if axis == "row":
            return [[(x, y) for x in range(self._width)] for y in range(self._height)]
        raise ValueError("axis must be one of: column, row")

    def rows(self) -> GridRows:
        return ["".join(self._columns[x][y].symbol for x in range(self._width)) for y in range(self._height)]

    def serialize(self) -> str:
        return "".join(f"{row}\n" for row in self.rows())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._columns == other._columns
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, rows={self.rows()!r})"

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise BoundsError(x, y, self._width, self._height)
