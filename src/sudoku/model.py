"""Board value types, region geometry, and the clue-count table."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional, Set, Tuple, Union

Board = List[List[int]]  # 0 = empty, values 1..N


class Size(IntEnum):
    SIX = 6
    NINE = 9


class Difficulty(Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def coerce(cls, value: Union["Difficulty", str]) -> "Difficulty":
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise ValueError(f"Unknown difficulty: {value!r} (expected Easy, Medium or Hard)")


SUPPORTED_SIZES = (Size.SIX, Size.NINE)

# Clues kept in a generated puzzle, per size and difficulty.
CLUE_TABLE: Dict[Size, Dict[Difficulty, int]] = {
    Size.NINE: {Difficulty.EASY: 43, Difficulty.MEDIUM: 35, Difficulty.HARD: 27},
    Size.SIX: {Difficulty.EASY: 24, Difficulty.MEDIUM: 18, Difficulty.HARD: 12},
}


@dataclass(frozen=True, order=True)
class Position:
    row: int
    col: int


@dataclass
class SolveResult:
    """
    Outcome of a top-level solve request.
    `status` is one of "solved", "unsolvable" or "conflict"; `board` is only set
    when solved, `conflicts` only when the input already broke a rule.
    """

    status: str
    size: int
    board: Optional[Board] = None
    conflicts: Set[Position] = field(default_factory=set)
    duration_ms: Optional[float] = None

    @property
    def solved(self) -> bool:
        return self.status == "solved" and self.board is not None


def coerce_size(size: Union[Size, int]) -> Size:
    try:
        return Size(int(size))
    except ValueError:
        raise ValueError(f"Unsupported grid size: {size} (expected 6 or 9)") from None


def region_dims(size: int) -> Tuple[int, int]:
    """Return (width, height) of one region for the given grid size."""
    if size == 9:
        return 3, 3
    if size == 6:
        return 3, 2
    # Anything else is outside the supported sizes; treat it like a 9x9 grid.
    return 3, 3


def create_empty_grid(size: int) -> Board:
    return [[0] * size for _ in range(size)]


def copy_board(board: Board) -> Board:
    return [list(row) for row in board]


def clue_count(size: Union[Size, int], difficulty: Union[Difficulty, str]) -> int:
    return CLUE_TABLE[coerce_size(size)][Difficulty.coerce(difficulty)]


def count_clues(board: Board) -> int:
    return sum(1 for row in board for value in row if value != 0)
