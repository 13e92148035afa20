from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from binairo.errors import ParseError
from binairo.results import Solved
from binairo.solver import solve_with_outcome
from binairo.text_format import format_grid, parse_grid
from binairo.utils import SolveTrace
from binairo.validation import find_violations, is_valid_solution


class SolveRequest(BaseModel):
    rows: list[str] = Field(
        ...,
        description="Puzzle rows using ' ' for empty cells and '0'/'1' for given cells. Short rows are padded.",
    )
    trace: bool = Field(default=False, description="Include solver trace output in the response")
    trace_steps: bool = Field(default=False, description="Include structured trace steps for walkthrough/debugging.")
    trace_max_steps: int = Field(default=1000, ge=1, le=20000, description="Maximum number of trace steps to return.")
    failure_max_lines: int = Field(default=200, ge=1, le=20000, description="Maximum number of failure report lines to return.")


class TraceStepResponse(BaseModel):
    event: str
    message: str
    depth: int
    x: Optional[int] = None
    y: Optional[int] = None
    value: Optional[str] = None
    grid: Optional[list[str]] = None


class SolveResponse(BaseModel):
    solved: bool
    complete: bool
    grid_rows: list[str]
    grid_text: str
    violations: list[str]
    failure: Optional[list[str]] = None
    trace: Optional[list[str]] = None
    trace_steps: Optional[list[TraceStepResponse]] = None
    trace_truncated: bool = False


class ValidateRequest(BaseModel):
    rows: list[str] = Field(..., description="Grid rows using ' ', '0' and '1'")


class ValidateResponse(BaseModel):
    complete: bool
    valid: bool
    violations: list[str]


app = FastAPI(
    title="Binairo Solver API",
    description="Solve Binairo (Takuzu) grids with rule propagation and guess-and-backtrack search.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://127.0.0.1:5173", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/solve", response_model=SolveResponse)
def solve(request: SolveRequest) -> SolveResponse:
    try:
        puzzle = parse_grid(request.rows)
    except ParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    tracer = None
    trace_log: list[str] = []
    trace_steps: list[dict[str, object]] = []
    if request.trace or request.trace_steps:
        tracer = SolveTrace(
            trace_log=trace_log if request.trace else None,
            trace_steps=trace_steps if request.trace_steps else None,
            max_steps=request.trace_max_steps,
        )

    outcome = solve_with_outcome(puzzle, tracer)
    result = outcome.grid if isinstance(outcome, Solved) else puzzle
    return SolveResponse(
        solved=isinstance(outcome, Solved),
        complete=result.is_complete(),
        grid_rows=result.rows(),
        grid_text=format_grid(result),
        violations=find_violations(result),
        failure=None if isinstance(outcome, Solved) else outcome.describe(request.failure_max_lines),
        trace=trace_log if request.trace else None,
        trace_steps=trace_steps if request.trace_steps else None,
        trace_truncated=tracer is not None and tracer.truncated,
    )


@app.post("/validate", response_model=ValidateResponse)
def validate(request: ValidateRequest) -> ValidateResponse:
    try:
        grid = parse_grid(request.rows)
    except ParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return ValidateResponse(
        complete=grid.is_complete(),
        valid=is_valid_solution(grid),
        violations=find_violations(grid),
    )
