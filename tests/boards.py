"""Shared boards and checks for the test suite."""

from src.sudoku.model import region_dims

CLASSIC_PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

CLASSIC_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

SIX_SOLUTION = [
    [1, 2, 3, 4, 5, 6],
    [4, 5, 6, 1, 2, 3],
    [2, 3, 1, 5, 6, 4],
    [5, 6, 4, 2, 3, 1],
    [3, 1, 2, 6, 4, 5],
    [6, 4, 5, 3, 1, 2],
]


def regions(board, size):
    width, height = region_dims(size)
    for top in range(0, size, height):
        for left in range(0, size, width):
            yield [board[r][c] for r in range(top, top + height) for c in range(left, left + width)]


def is_complete_solution(board, size):
    digits = list(range(1, size + 1))
    if len(board) != size or any(len(row) != size for row in board):
        return False
    rows_ok = all(sorted(row) == digits for row in board)
    cols_ok = all(sorted(board[r][c] for r in range(size)) == digits for c in range(size))
    regions_ok = all(sorted(cells) == digits for cells in regions(board, size))
    return rows_ok and cols_ok and regions_ok


def agrees_with(puzzle, solution):
    return all(
        value == 0 or solution[r][c] == value
        for r, row in enumerate(puzzle)
        for c, value in enumerate(row)
    )
