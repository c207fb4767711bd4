"""Grid models, legality rules, backtracking solver, and generator for 6x6 and 9x9 sudoku."""

from .model import (
    Board,
    Difficulty,
    Position,
    Size,
    SolveResult,
    clue_count,
    create_empty_grid,
    region_dims,
)
from .rules import is_valid_move, validate_board
from .solver_core import solve, solve_random
from .generator import generate
from .parser import format_board, parse_board, parse_puzzle

__all__ = [
    "Board",
    "Difficulty",
    "Position",
    "Size",
    "SolveResult",
    "clue_count",
    "create_empty_grid",
    "region_dims",
    "is_valid_move",
    "validate_board",
    "solve",
    "solve_random",
    "generate",
    "format_board",
    "parse_board",
    "parse_puzzle",
]
