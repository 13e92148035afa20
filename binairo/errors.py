from .cell import Cell


class BinairoError(Exception):
    """Base class for every error raised by the binairo package."""


class BoundsError(BinairoError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Coordinate ({x},{y}) is outside a {width}x{height} grid")
        self.x = x
        self.y = y


class ParseError(BinairoError, ValueError):
    pass


class NoEmptyCellError(BinairoError):
    pass


class Contradiction(BinairoError):
    """Raised when a cell would be overwritten with the opposite committed value.

    Carries the coordinate together with the value already in the cell and the
    value that was refused, so failed search branches can be diagnosed later.
    """

    def __init__(self, x: int, y: int, current: Cell, attempted: Cell) -> None:
        super().__init__(f"Collision ({x},{y}): {current} => {attempted}")
        self.x = x
        self.y = y
        self.current = current
        self.attempted = attempted
