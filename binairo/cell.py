from enum import Enum


class Cell(Enum):
    EMPTY = " "
    ZERO = "0"
    ONE = "1"

    @property
    def symbol(self) -> str:
        return self.value

    def invert(self) -> "Cell":
        if self is Cell.ZERO:
            return Cell.ONE
        if self is Cell.ONE:
            return Cell.ZERO
        return Cell.EMPTY

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        return cls(symbol)

    def __str__(self) -> str:
        return self.name
