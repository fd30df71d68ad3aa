"""Grid algorithms: maze search, sudoku checking and solving, matrix transforms."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

DEMO_MAZE = (
    (1, 0, 0, 0),
    (1, 1, 0, 1),
    (0, 1, 0, 0),
    (1, 1, 1, 1),
)

_DIGITS = "123456789"


def solve_maze(maze: Sequence[Sequence[int]]) -> Optional[list[list[int]]]:
    """Find a path of open (1) cells from the top-left to the bottom-right corner.

    Moves go down first, then right. Returns the path as a 0/1 grid, or None.
    """
    rows = len(maze)
    if rows == 0:
        return None
    cols = len(maze[0])
    path = [[0] * cols for _ in range(rows)]

    def walk(x: int, y: int) -> bool:
        if x == rows - 1 and y == cols - 1 and maze[x][y] == 1:
            path[x][y] = 1
            return True
        if not (0 <= x < rows and 0 <= y < cols) or maze[x][y] != 1 or path[x][y]:
            return False
        path[x][y] = 1
        if walk(x + 1, y) or walk(x, y + 1):
            return True
        path[x][y] = 0
        return False

    return path if walk(0, 0) else None


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid with each value padded by a space on both sides, one row per line."""
    return "".join("".join(f" {value} " for value in row) + "\n" for row in grid)


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Return True if no filled digit repeats in a row, column or 3x3 box."""
    seen: set[tuple[str, int, str]] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == ".":
                continue
            keys = (("row", r, cell), ("col", c, cell), ("box", r // 3 * 3 + c // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def _fits(board: Sequence[Sequence[str]], row: int, col: int, digit: str) -> bool:
    top, left = 3 * (row // 3), 3 * (col // 3)
    return all(
        board[i][col] != digit
        and board[row][i] != digit
        and board[top + i // 3][left + i % 3] != digit
        for i in range(9)
    )


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the '.' cells of a 9x9 board in place; return False if no solution exists."""
    empties = [(r, c) for r in range(9) for c in range(9) if board[r][c] == "."]

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for digit in _DIGITS:
            if _fits(board, row, col, digit):
                board[row][col] = digit
                if fill(index + 1):
                    return True
                board[row][col] = "."
        return False

    return fill(0)


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    matrix[:] = [list(row) for row in zip(*matrix[::-1])]


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transpose of ``matrix``."""
    return [list(column) for column in zip(*matrix)]


def largest_local(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the maximum of every 3x3 window of a square grid."""
    n = len(grid)
    if n < 3:
        raise ValueError("grid must be at least 3x3")
    return [
        [
            max(grid[r][c] for r in range(i, i + 3) for c in range(j, j + 3))
            for j in range(n - 2)
        ]
        for i in range(n - 2)
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve the built-in demonstration maze and print the path."""
    parser = argparse.ArgumentParser(
        description="Solve a 4x4 demonstration maze by backtracking."
    )
    parser.parse_args(argv)
    solution = solve_maze(DEMO_MAZE)
    if solution is None:
        print("Solution doesn't exist")
    else:
        print(format_grid(solution), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())