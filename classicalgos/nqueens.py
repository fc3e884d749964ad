"""The N-queens puzzle solved by column-wise backtracking."""

from __future__ import annotations

from collections.abc import Sequence


def solve_n_queens(n: int) -> list[list[bool]] | None:
    """Return the first placement of ``n`` non-attacking queens, or None if none exists.

    Queens are placed column by column, trying rows from the top. The result
    is indexed ``board[row][col]`` and is True where a queen stands.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    rows_of_columns: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in used_rows or row - col in used_diagonals or row + col in used_anti_diagonals:
                continue
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            rows_of_columns.append(row)
            if place(col + 1):
                return True
            rows_of_columns.pop()
            used_rows.remove(row)
            used_diagonals.remove(row - col)
            used_anti_diagonals.remove(row + col)
        return False

    if not place(0):
        return None
    board = [[False] * n for _ in range(n)]
    for col, row in enumerate(rows_of_columns):
        board[row][col] = True
    return board


def format_board(board: Sequence[Sequence[bool]]) -> str:
    """Render a board with `` Q `` for queens and `` . `` for empty squares."""
    lines = ["".join(" Q " if cell else " . " for cell in row) for row in board]
    return "".join(line + "\n" for line in lines) + "\n"