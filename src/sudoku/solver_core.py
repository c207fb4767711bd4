"""Backtracking solver with ascending and shuffled candidate orders."""

import random
from typing import Callable, List, Optional, Tuple

from .model import Board, copy_board, count_clues
from .rules import is_valid_move
from src.utils.trace import Tracer

CandidateOrder = Callable[[int], List[int]]


def solve(board: Board, size: int, tracer: Optional[Tracer] = None) -> Optional[Board]:
    """
    Complete `board` by backtracking over empty cells in row-major order, trying
    1..size in ascending order. Returns a NEW board, or None if no completion exists.

    The input is not checked for existing conflicts; callers are expected to run
    `validate_board` first, since a board that already repeats a digit can still
    come back "solved" around the repeated value.
    """
    return _run(board, size, _ascending, tracer)


def solve_random(
    board: Board,
    size: int,
    rng: Optional[random.Random] = None,
    tracer: Optional[Tracer] = None,
) -> Optional[Board]:
    """
    Same search as `solve`, but the candidate list is reshuffled at every step.
    Pass a seeded `random.Random` to make the result reproducible.
    """
    rng = rng or random.Random()

    def _shuffled(size: int) -> List[int]:
        values = list(range(1, size + 1))
        rng.shuffle(values)
        return values

    return _run(board, size, _shuffled, tracer)


def _run(board: Board, size: int, order: CandidateOrder, tracer: Optional[Tracer]) -> Optional[Board]:
    # Steps are only recorded when the caller hands in a tracer.
    tracer = tracer or Tracer(enabled=False)
    # Work on a private copy so the caller's board is never touched.
    grid = copy_board(board)
    filled = count_clues(grid)
    if _backtrack(grid, size, order, filled, tracer):
        tracer.log_solution_found(filled=size * size)
        return grid
    tracer.log_no_solution(filled=filled)
    return None


def _backtrack(grid: Board, size: int, order: CandidateOrder, filled: int, tracer: Tracer) -> bool:
    empty = _find_empty(grid, size)
    if empty is None:
        return True

    row, col = empty
    candidates = order(size)
    for value in candidates:
        if not is_valid_move(grid, row, col, value, size):
            continue

        grid[row][col] = value
        tracer.log_assign(row, col, value, candidates=len(candidates), filled=filled + 1)

        if _backtrack(grid, size, order, filled + 1, tracer):
            return True

        grid[row][col] = 0

    tracer.log_backtrack(row, col)
    return False


def _find_empty(grid: Board, size: int) -> Optional[Tuple[int, int]]:
    for r in range(size):
        for c in range(size):
            if grid[r][c] == 0:
                return r, c
    return None


def _ascending(size: int) -> List[int]:
    return list(range(1, size + 1))
