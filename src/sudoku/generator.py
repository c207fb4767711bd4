"""Puzzle generation: random full board, then clue removal by difficulty."""

import random
from typing import Optional, Union

from .model import Board, Difficulty, Size, clue_count, coerce_size, create_empty_grid
from .solver_core import solve_random
from src.utils.trace import Tracer


def generate(
    size: Union[Size, int],
    difficulty: Union[Difficulty, str],
    rng: Optional[random.Random] = None,
    tracer: Optional[Tracer] = None,
) -> Board:
    """
    Build a puzzle with exactly the clue count listed for (size, difficulty).
    At least one solution exists (the board the clues were taken from); a unique
    solution is likely but never checked.
    """
    n = int(coerce_size(size))
    clues = clue_count(n, difficulty)
    rng = rng or random.Random()
    # Steps are only recorded when the caller hands in a tracer.
    tracer = tracer or Tracer(enabled=False)

    empty = create_empty_grid(n)
    solved = solve_random(empty, n, rng=rng, tracer=tracer)
    if solved is None:
        # An empty grid always has a completion; reaching this means a broken setup.
        return empty

    board = solved
    cells_to_remove = n * n - clues
    removed = 0
    while removed < cells_to_remove:
        r = rng.randrange(n)
        c = rng.randrange(n)
        if board[r][c] != 0:
            board[r][c] = 0
            removed += 1

    tracer.log_cells_cleared(cleared=removed, clues=clues)
    return board
