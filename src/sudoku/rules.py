"""Row, column and region uniqueness checks."""

from typing import Iterator, Set, Tuple

from .model import Board, Position, region_dims


def _peers(row: int, col: int, size: int) -> Iterator[Tuple[int, int]]:
    """Yield every cell sharing a row, column or region with (row, col), excluding itself."""
    for j in range(size):
        if j != col:
            yield row, j

    for i in range(size):
        if i != row:
            yield i, col

    width, height = region_dims(size)
    start_row = (row // height) * height
    start_col = (col // width) * width
    for i in range(start_row, start_row + height):
        for j in range(start_col, start_col + width):
            if i != row or j != col:
                yield i, j


def is_valid_move(board: Board, row: int, col: int, value: int, size: int) -> bool:
    """
    Check whether `value` can sit at (row, col) without repeating a digit in the
    same row, column or region. The cell itself is ignored, so a filled cell can
    be re-checked against its peers.
    """
    for i, j in _peers(row, col, size):
        if board[i][j] == value:
            return False
    return True


def validate_board(board: Board, size: int) -> Set[Position]:
    """Return every filled cell whose value is repeated by one of its peers."""
    conflicts: Set[Position] = set()
    for r in range(size):
        for c in range(size):
            value = board[r][c]
            if value == 0:
                continue
            # Both cells of a duplicated pair are reported since each one is tested independently.
            if not is_valid_move(board, r, c, value, size):
                conflicts.add(Position(r, c))
    return conflicts
