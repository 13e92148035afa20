from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Optional, Union

from .errors import BinairoError
from .grid import Grid
from .utils import indent


@dataclass(frozen=True)
class Solved:
    grid: Grid

    @property
    def solved(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A search branch that could not be completed.

    ``cause`` is the first underlying failure and ``secondary_cause`` the
    alternative that was tried after it, when there was one.
    """

    message: str
    cause: Optional[Union[BinairoError, "Failure"]] = None
    secondary_cause: Optional[Union[BinairoError, "Failure"]] = None

    @property
    def solved(self) -> bool:
        return False

    def causes(self) -> Iterator[Union[BinairoError, "Failure"]]:
        for reason in (self.cause, self.secondary_cause):
            if reason is None:
                continue
            yield reason
            if isinstance(reason, Failure):
                yield from reason.causes()

    def root_errors(self) -> list[BinairoError]:
        return [reason for reason in self.causes() if isinstance(reason, BinairoError)]

    def describe(self, max_lines: Optional[int] = None) -> list[str]:
        """Indented report of this failure and its causes, depth first.

        With ``max_lines`` set, the report stops after that many lines and ends
        with a truncation marker.
        """
        lines = self._report_lines()
        if max_lines is None:
            return list(lines)
        report = list(islice(lines, max_lines))
        if next(lines, None) is not None:
            report.append(f"... report truncated after {max_lines} lines")
        return report

    def _report_lines(self) -> Iterator[str]:
        pending: list[tuple[int, Union[BinairoError, Failure]]] = [(0, self)]
        while pending:
            depth, reason = pending.pop()
            if isinstance(reason, Failure):
                yield f"{indent(depth)}{reason.message}"
                for nested in (reason.secondary_cause, reason.cause):
                    if nested is not None:
                        pending.append((depth + 1, nested))
            else:
                yield f"{indent(depth)}{reason}"


SolveOutcome = Union[Solved, Failure]
