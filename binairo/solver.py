import logging
import sys
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from .grid import Grid
from .results import SolveOutcome, Solved
from .search import solve_impl
from .utils import SolveTrace, trace


logger = logging.getLogger(__name__)

# solve_impl -> find_guess -> guess_solve -> _attempt per guessed cell
FRAMES_PER_GUESS = 4
RECURSION_MARGIN = 200

_headroom_lock = threading.Lock()
_active_searches = 0
_original_limit = sys.getrecursionlimit()


def solve(grid: Grid, tracer: Optional[SolveTrace] = None) -> Grid:
    """Returns the solved grid, or ``grid`` itself when no solution was reached."""
    outcome = solve_with_outcome(grid, tracer)
    if isinstance(outcome, Solved):
        return outcome.grid
    return grid


def solve_with_outcome(grid: Grid, tracer: Optional[SolveTrace] = None) -> SolveOutcome:
    empty_cells = grid.empty_count()
    trace(
        tracer,
        "start",
        f"Initialized search: width={grid.width}, height={grid.height}, empty_cells={empty_cells}",
        0,
        grid=grid,
    )
    with _recursion_headroom(empty_cells * FRAMES_PER_GUESS + RECURSION_MARGIN):
        outcome = solve_impl(grid, tracer)

    if isinstance(outcome, Solved):
        logger.debug("Solved %dx%d grid", grid.width, grid.height)
    else:
        logger.debug("No solution reached: %s", outcome.message)
    return outcome


@contextmanager
def _recursion_headroom(frames: int) -> Iterator[None]:
    """Keeps the recursion limit at or above ``frames`` while the block runs.

    The limit is interpreter-wide, so overlapping searches share one raise:
    each may lift it further, and only the last one to leave restores the
    limit that was in place before the first one entered.
    """
    global _active_searches, _original_limit
    with _headroom_lock:
        if _active_searches == 0:
            _original_limit = sys.getrecursionlimit()
        _active_searches += 1
        if frames > sys.getrecursionlimit():
            sys.setrecursionlimit(frames)
    try:
        yield
    finally:
        with _headroom_lock:
            _active_searches -= 1
            if _active_searches == 0:
                sys.setrecursionlimit(_original_limit)
