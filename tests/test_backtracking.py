import math

import pytest

from dsakit.backtracking import hamiltonian_cycles, rat_in_maze, solve_n_queens

SOURCE_GRAPH = [
    [0, 1, 0, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 0, 0, 0, 0],
    [0, 1, 0, 1, 0, 0, 0, 1],
    [0, 0, 1, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 0],
    [0, 0, 0, 0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0, 1, 0, 1],
    [1, 0, 1, 0, 0, 0, 1, 0],
]

SOURCE_MAZE = ["0000", "000X", "000X", "0X00"]


def _assert_cycle(cycle, graph, start):
    n = len(graph)
    assert cycle[0] == start and cycle[-1] == start
    assert len(cycle) == n + 1
    assert sorted(cycle[:-1]) == list(range(n))
    for a, b in zip(cycle, cycle[1:]):
        assert graph[a][b] == 1


def test_source_graph_cycles_are_hamiltonian():
    cycles = list(hamiltonian_cycles(SOURCE_GRAPH, 0))
    assert len(cycles) >= 2
    for cycle in cycles:
        _assert_cycle(cycle, SOURCE_GRAPH, 0)
        assert list(reversed(cycle)) in cycles


def test_cycles_from_other_start():
    cycles = list(hamiltonian_cycles(SOURCE_GRAPH, 3))
    assert len(cycles) >= 2
    for cycle in cycles:
        _assert_cycle(cycle, SOURCE_GRAPH, 3)


def test_triangle_cycles_in_neighbour_order():
    triangle = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
    assert list(hamiltonian_cycles(triangle)) == [[0, 1, 2, 0], [0, 2, 1, 0]]


def test_path_graph_has_no_cycle():
    path = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    assert list(hamiltonian_cycles(path)) == []


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        hamiltonian_cycles([[0, 1], [1]])


def test_start_out_of_range_rejected():
    with pytest.raises(ValueError):
        hamiltonian_cycles(SOURCE_GRAPH, 8)


def test_four_queens_first_solution():
    assert solve_n_queens(4) == [
        [0, 0, 1, 0],
        [1, 0, 0, 0],
        [0, 0, 0, 1],
        [0, 1, 0, 0],
    ]


@pytest.mark.parametrize("n", [2, 3])
def test_no_queens_solution(n):
    assert solve_n_queens(n) is None


@pytest.mark.parametrize("n", [1, 5, 6, 8])
def test_queens_do_not_attack(n):
    board = solve_n_queens(n)
    queens = [(r, c) for r in range(n) for c in range(n) if board[r][c] == 1]
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


def test_negative_board_rejected():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def _follow(grid):
    rows, cols = len(grid), len(grid[0])
    i = j = 0
    steps = 1
    while (i, j) != (rows - 1, cols - 1):
        if j + 1 < cols and grid[i][j + 1] == 1:
            j += 1
        elif i + 1 < rows and grid[i + 1][j] == 1:
            i += 1
        else:
            return None
        steps += 1
    return steps


def test_source_maze_paths_are_valid():
    paths = rat_in_maze(SOURCE_MAZE)
    assert paths
    for grid in paths:
        ones = sum(map(sum, grid))
        assert ones == len(SOURCE_MAZE) + len(SOURCE_MAZE[0]) - 1
        assert _follow(grid) == ones
        for r, row in enumerate(SOURCE_MAZE):
            for c, cell in enumerate(row):
                if cell == "X":
                    assert grid[r][c] == 0
    assert len({tuple(map(tuple, g)) for g in paths}) == len(paths)


@pytest.mark.parametrize("size", [1, 2, 3, 4])
def test_open_grid_path_count(size):
    maze = ["0" * size] * size
    assert len(rat_in_maze(maze)) == math.comb(2 * size - 2, size - 1)


def test_single_cell_maze():
    assert rat_in_maze(["0"]) == [[[1]]]


def test_blocked_start_has_no_path():
    assert rat_in_maze(["X0", "00"]) == []


def test_blocked_maze_has_no_path():
    assert rat_in_maze(["0X", "X0"]) == []


@pytest.mark.parametrize("maze", [[], [""], ["00", "0"]])
def test_malformed_maze_rejected(maze):
    with pytest.raises(ValueError):
        rat_in_maze(maze)