import copy

import pytest

from algosuite.grids import (
    DEMO_MAZE,
    format_grid,
    is_valid_sudoku,
    largest_local,
    main,
    rotate,
    solve_maze,
    solve_sudoku,
    transpose,
)

VALID_BOARD = [
    "53..7....",
    "6..195...",
    ".98....6.",
    "8...6...3",
    "4..8.3..1",
    "7...2...6",
    ".6....28.",
    "...419..5",
    "....8..79",
]


def _board(rows):
    return [list(row) for row in rows]


def test_solve_maze_demo_path():
    assert solve_maze(DEMO_MAZE) == [
        [1, 0, 0, 0],
        [1, 1, 0, 0],
        [0, 1, 0, 0],
        [0, 1, 1, 1],
    ]


def test_solve_maze_path_uses_open_cells_only():
    maze = [[1, 1, 1], [0, 1, 0], [1, 1, 1]]
    path = solve_maze(maze)
    assert path[0][0] == 1
    assert path[2][2] == 1
    assert all(
        maze[r][c] == 1
        for r, row in enumerate(path)
        for c, cell in enumerate(row)
        if cell == 1
    )


def test_solve_maze_blocked_goal():
    assert solve_maze([[1, 1], [1, 0]]) is None


def test_solve_maze_empty():
    assert solve_maze([]) is None


def test_format_grid_layout():
    assert format_grid([[1, 0], [0, 1]]) == " 1  0 \n 0  1 \n"


def test_main_prints_demo_solution(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == format_grid(solve_maze(DEMO_MAZE))


def test_valid_sudoku_board():
    assert is_valid_sudoku(_board(VALID_BOARD))


def test_invalid_sudoku_board():
    rows = list(VALID_BOARD)
    rows[0] = "83..7...."
    assert not is_valid_sudoku(_board(rows))


def test_solve_sudoku_fills_board_consistently():
    board = _board(VALID_BOARD)
    original = copy.deepcopy(board)
    assert solve_sudoku(board)
    assert all(cell != "." for row in board for cell in row)
    assert is_valid_sudoku(board)
    assert all(
        board[r][c] == original[r][c]
        for r in range(9)
        for c in range(9)
        if original[r][c] != "."
    )


def test_solve_sudoku_unsolvable():
    rows = ["12345678.", "........9"] + ["........."] * 7
    board = _board(rows)
    assert not solve_sudoku(board)
    assert board == _board(rows)


def test_rotate_once():
    matrix = [[1, 2], [3, 4]]
    rotate(matrix)
    assert matrix == [[3, 1], [4, 2]]


def test_rotate_four_times_is_identity_and_in_place():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    original = copy.deepcopy(matrix)
    alias = matrix
    for _ in range(4):
        rotate(matrix)
    assert alias is matrix
    assert matrix == original


def test_transpose_swaps_indices():
    matrix = [[1, 2, 3], [4, 5, 6]]
    result = transpose(matrix)
    assert len(result) == 3
    assert all(len(row) == 2 for row in result)
    assert all(result[j][i] == matrix[i][j] for i in range(2) for j in range(3))


def test_transpose_twice_round_trips():
    matrix = [[1, 2], [3, 4], [5, 6]]
    assert transpose(transpose(matrix)) == matrix


def test_largest_local_three_by_three():
    grid = [[9, 9, 8], [1, 7, 3], [4, 2, 11]]
    assert largest_local(grid) == [[max(max(row) for row in grid)]]


def test_largest_local_window_maxima():
    grid = [[(r * 5 + c * 3) % 7 for c in range(5)] for r in range(5)]
    result = largest_local(grid)
    assert len(result) == 3
    for i in range(3):
        for j in range(3):
            window = [grid[r][c] for r in range(i, i + 3) for c in range(j, j + 3)]
            assert result[i][j] in window
            assert all(result[i][j] >= value for value in window)


def test_largest_local_too_small():
    with pytest.raises(ValueError):
        largest_local([[1, 2], [3, 4]])