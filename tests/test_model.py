import pytest

from src.sudoku.model import (
    Difficulty,
    Position,
    Size,
    SolveResult,
    clue_count,
    coerce_size,
    copy_board,
    count_clues,
    create_empty_grid,
    region_dims,
)


def test_region_dims_per_size():
    assert region_dims(9) == (3, 3)
    assert region_dims(6) == (3, 2)
    assert region_dims(Size.SIX) == (3, 2)


def test_region_dims_falls_back_to_nine_by_nine_shape():
    assert region_dims(4) == (3, 3)


def test_create_empty_grid_rows_are_independent():
    grid = create_empty_grid(6)
    assert len(grid) == 6 and all(row == [0] * 6 for row in grid)
    grid[0][0] = 1
    assert grid[1][0] == 0


def test_copy_board_is_deep():
    board = create_empty_grid(9)
    clone = copy_board(board)
    clone[4][4] = 7
    assert board[4][4] == 0


@pytest.mark.parametrize(
    "size,difficulty,expected",
    [
        (9, "Easy", 43),
        (9, "Medium", 35),
        (9, "Hard", 27),
        (6, "Easy", 24),
        (6, "Medium", 18),
        (6, "Hard", 12),
    ],
)
def test_clue_table(size, difficulty, expected):
    assert clue_count(size, difficulty) == expected


def test_difficulty_accepts_any_case():
    assert Difficulty.coerce("hard") is Difficulty.HARD
    assert Difficulty.coerce(Difficulty.EASY) is Difficulty.EASY
    with pytest.raises(ValueError):
        Difficulty.coerce("Expert")


def test_unsupported_size_is_rejected():
    assert coerce_size(6) is Size.SIX
    with pytest.raises(ValueError):
        coerce_size(16)


def test_count_clues_ignores_empty_cells():
    board = create_empty_grid(6)
    board[0][0] = 3
    board[5][5] = 1
    assert count_clues(board) == 2


def test_solve_result_solved_flag():
    assert SolveResult(status="solved", size=9, board=create_empty_grid(9)).solved
    assert not SolveResult(status="unsolvable", size=9).solved
    assert not SolveResult(status="conflict", size=9, conflicts={Position(0, 0)}).solved
