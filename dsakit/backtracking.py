"""Backtracking searches: Hamiltonian cycles, N queens and the rat in a maze."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]], start: int = 0
) -> Iterator[list[int]]:
    """Yield every Hamiltonian cycle that begins and ends at ``start``.

    ``adjacency`` is a square matrix whose non-zero entries mark edges.
    Neighbours are tried in index order, so a cycle and its reverse are
    both produced. Each cycle lists ``start`` first and last.
    """
    matrix = [list(row) for row in adjacency]
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < n:
        raise ValueError(f"start vertex {start} is out of range")

    cycle = [start]
    visited: set[int] = set()

    def solve(vertex: int) -> Iterator[list[int]]:
        if vertex == start and len(cycle) == n + 1:
            yield list(cycle)
            return
        for neighbour, connected in enumerate(matrix[vertex]):
            if connected and neighbour not in visited:
                visited.add(neighbour)
                cycle.append(neighbour)
                yield from solve(neighbour)
                visited.discard(neighbour)
                cycle.pop()

    return solve(start)


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place ``n`` non-attacking queens column by column.

    Returns the first board found as rows of 0 and 1, or ``None`` when no
    placement exists.
    """
    if n < 0:
        raise ValueError("board size must be non-negative")
    rows_by_column: list[int] = []
    used_rows: set[int] = set()
    left_diagonals: set[int] = set()
    right_diagonals: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if (
                row in used_rows
                or row - col in left_diagonals
                or row + col in right_diagonals
            ):
                continue
            used_rows.add(row)
            left_diagonals.add(row - col)
            right_diagonals.add(row + col)
            rows_by_column.append(row)
            if place(col + 1):
                return True
            rows_by_column.pop()
            used_rows.discard(row)
            left_diagonals.discard(row - col)
            right_diagonals.discard(row + col)
        return False

    if not place(0):
        return None
    board = [[0] * n for _ in range(n)]
    for col, row in enumerate(rows_by_column):
        board[row][col] = 1
    return board


def rat_in_maze(maze: Sequence[str]) -> list[list[list[int]]]:
    """Return every path from the top-left to the bottom-right cell.

    The rat moves only right or down and may not enter a cell marked
    ``'X'``. Each path is a grid of 0 and 1 marking the cells it uses;
    paths going right first come first. An empty list means no path.
    """
    grid = list(maze)
    if not grid or not grid[0]:
        raise ValueError("maze must have at least one cell")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("maze rows must all have the same length")
    last_row, last_col = len(grid) - 1, cols - 1

    solution = [[0] * cols for _ in grid]
    paths: list[list[list[int]]] = []

    def walk(i: int, j: int) -> bool:
        if i == last_row and j == last_col:
            solution[i][j] = 1
            paths.append([row[:] for row in solution])
            return True
        if i > last_row or j > last_col:
            return False
        if grid[i][j] == "X":
            return False
        solution[i][j] = 1
        right = walk(i, j + 1)
        down = walk(i + 1, j)
        solution[i][j] = 0
        return right or down

    walk(0, 0)
    return paths