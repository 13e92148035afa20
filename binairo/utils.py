from typing import Optional

from .cell import Cell
from .grid import Grid
from .types import TraceLog, TraceStep


class SolveTrace:
    """Observer collecting diagnostic events emitted while solving.

    ``trace_log`` receives indented text lines and ``trace_steps`` receives
    structured steps with a snapshot of the grid. Either sink may be omitted.
    """

    def __init__(
        self,
        trace_log: Optional[TraceLog] = None,
        trace_steps: Optional[list[TraceStep]] = None,
        max_steps: int = 1000,
    ) -> None:
        if max_steps < 1:
            raise ValueError("max_steps must be >= 1")
        self.trace_log = trace_log
        self.trace_steps = trace_steps
        self.max_steps = max_steps
        self.truncated = False

    def record(
        self,
        event: str,
        message: str,
        depth: int,
        grid: Optional[Grid] = None,
        x: Optional[int] = None,
        y: Optional[int] = None,
        value: Optional[Cell] = None,
    ) -> None:
        if self.trace_log is not None:
            self.trace_log.append(f"{indent(depth)}{message}")
        if self.trace_steps is None:
            return
        if len(self.trace_steps) >= self.max_steps:
            self.truncated = True
            return
        self.trace_steps.append(
            {
                "event": event,
                "message": message,
                "depth": depth,
                "x": x,
                "y": y,
                "value": None if value is None else value.symbol,
                "grid": None if grid is None else grid.rows(),
            }
        )


def trace(
    tracer: Optional[SolveTrace],
    event: str,
    message: str,
    depth: int,
    grid: Optional[Grid] = None,
    x: Optional[int] = None,
    y: Optional[int] = None,
    value: Optional[Cell] = None,
) -> None:
    if tracer is None:
        return
    tracer.record(event, message, depth, grid=grid, x=x, y=y, value=value)


def indent(depth: int) -> str:
    return "  " * depth
