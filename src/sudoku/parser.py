"""Board parser: convert puzzle text or nested lists into engine boards.

Supports:
- Compact strings ("53..7....6..195...") with 0, '.', '_' or '*' as empty cells
- Row-per-line text with "|", "+" or "," between cells and rule lines of "-", "=" and "+" between regions
- Nested lists of ints (e.g. straight from JSON)
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from .model import Board, Size, coerce_size

EMPTY_MARKERS = "0._*"
_SEPARATORS = re.compile(r"[\s|,+]+")
_RULE_LINE = re.compile(r"^[\s|+=-]*[-=][\s|+=-]*$")
_SIZE_BY_CELLS = {36: Size.SIX, 81: Size.NINE}

RawBoard = Union[str, Sequence[Sequence[Any]]]


def parse_board(raw: RawBoard, size: Optional[int] = None) -> Tuple[Board, Size]:
    """Parse `raw` into a (board, size) pair, inferring size from the cell count when not given."""
    if isinstance(raw, str):
        cells = grid_cells(raw)
    elif isinstance(raw, (list, tuple)):
        if raw and isinstance(raw[0], (list, tuple)):
            cells = [v for row in raw for v in row]
        else:
            cells = list(raw)
    else:
        raise TypeError(f"parse_board expects a string or nested list, got {type(raw).__name__}")

    if size is None:
        if len(cells) not in _SIZE_BY_CELLS:
            raise ValueError(
                f"Cannot infer grid size from {len(cells)} cells (expected 36 for 6x6 or 81 for 9x9)."
            )
        n = _SIZE_BY_CELLS[len(cells)]
    else:
        n = coerce_size(size)
        if len(cells) != n * n:
            raise ValueError(f"Expected {n * n} cells for a {n}x{n} grid, got {len(cells)}.")

    if not isinstance(raw, str) and raw and isinstance(raw[0], (list, tuple)):
        if len(raw) != n or any(len(row) != n for row in raw):
            raise ValueError(f"Board must be square ({n} x {n}).")

    board: Board = []
    for r in range(n):
        row: List[int] = []
        for c in range(n):
            row.append(_cell_value(cells[r * n + c], r, c, n))
        board.append(row)
    return board, n


def parse_puzzle(puzzle_json: Dict[str, Any]) -> Tuple[Board, Size]:
    """Parse the board held by a puzzle record ('grid', 'puzzle' or 'board' field)."""
    raw = None
    for key in ("grid", "puzzle", "board"):
        if puzzle_json.get(key) not in (None, ""):
            raw = puzzle_json[key]
            break
    if raw is None:
        raise ValueError(f"Puzzle {puzzle_json.get('id', 'unknown')} has no grid/puzzle/board field")

    size_value = puzzle_json.get("size")
    size = None
    if size_value not in (None, ""):
        # Accept 9, "9", "9x9" and "9*9".
        match = re.match(r"\s*(\d+)", str(size_value))
        if not match:
            raise ValueError(f"Invalid size field: {size_value!r}")
        size = int(match.group(1))
    return parse_board(raw, size)


def format_board(board: Board, empty: str = ".") -> str:
    """One row per line, cells separated by spaces, empty cells shown as `empty`."""
    return "\n".join(
        " ".join(empty if value == 0 else str(value) for value in row) for row in board
    )


def grid_cells(text: str) -> List[str]:
    """Split grid text into one token per cell. A dash inside a row stays, so "-1" is rejected later."""
    rows = [line for line in text.splitlines() if not _RULE_LINE.match(line)]
    return list(_SEPARATORS.sub("", "".join(rows)))


def _cell_value(raw: Any, r: int, c: int, n: int) -> int:
    if isinstance(raw, str):
        token = raw.strip()
        if token == "" or token in EMPTY_MARKERS:
            return 0
        if not token.isdigit():
            raise ValueError(f"Invalid value at ({r+1},{c+1}): {token!r} (not a digit).")
        value = int(token)
    elif isinstance(raw, bool) or raw is None:
        raise ValueError(f"Invalid value at ({r+1},{c+1}): {raw!r} (not an integer).")
    else:
        try:
            value = int(raw)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid value at ({r+1},{c+1}): {raw!r} (not an integer).") from None
        if value != raw:
            raise ValueError(f"Invalid value at ({r+1},{c+1}): {raw!r} (not an integer).")

    if value < 0 or value > n:
        raise ValueError(f"Invalid value at ({r+1},{c+1}): {value} (allowed: 0..{n}).")
    return value
