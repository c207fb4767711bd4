"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts either a board (nested lists or grid
text) or a raw puzzle dictionary compatible with `src.sudoku.parser.parse_puzzle`.
"""

import time
from typing import Any, Optional

from src.sudoku import solver_core
from src.sudoku.model import SolveResult
from src.sudoku.parser import parse_board, parse_puzzle
from src.sudoku.rules import validate_board
from src.utils.trace import get_tracer


def solve_puzzle(puzzle: Any, size: Optional[int] = None) -> SolveResult:
    """
    Solve a puzzle and report the outcome as a `SolveResult`.
    Accepts:
      - Boards as nested lists or grid text (size inferred unless given)
      - Raw puzzle dictionaries (parsed via `parse_puzzle`)
    A board that already repeats a digit is not handed to the solver; its
    conflicting cells come back with status "conflict".
    """
    if isinstance(puzzle, dict):
        board, n = parse_puzzle(puzzle)
    elif isinstance(puzzle, (list, tuple, str)):
        board, n = parse_board(puzzle, size)
    else:
        raise TypeError("solve_puzzle expects a board or puzzle dictionary")

    tracer = get_tracer()
    conflicts = validate_board(board, n)
    tracer.log_conflict_scan(len(conflicts))
    if conflicts:
        return SolveResult(status="conflict", size=int(n), conflicts=conflicts)

    start = time.perf_counter()
    solved = solver_core.solve(board, n, tracer=tracer)
    duration_ms = (time.perf_counter() - start) * 1000.0

    if solved is None:
        return SolveResult(status="unsolvable", size=int(n))
    return SolveResult(status="solved", size=int(n), board=solved, duration_ms=duration_ms)


__all__ = ["solve_puzzle"]
