import random

import pytest

from mazerunner.maze import Direction, Maze
from mazerunner.solvers import solve_bfs, solve_dfs

SOLVERS = [solve_dfs, solve_bfs]


def _generated(width, height, seed):
    maze = Maze(width, height, random.Random(seed))
    maze.generate()
    return maze


def _open(maze, point, direction):
    x, y = point
    dx, dy = direction.offset()
    maze.get(x, y).walls[direction] = False
    maze.get(x + dx, y + dy).walls[direction.opposite()] = False


def _assert_walkable(maze, path):
    for (ax, ay), (bx, by) in zip(path, path[1:]):
        delta = (bx - ax, by - ay)
        direction = next(d for d in Direction if d.offset() == delta)
        assert maze.get(ax, ay).walls[direction] is False


@pytest.mark.parametrize("solver", SOLVERS)
@pytest.mark.parametrize("seed", [0, 1, 2, 10])
def test_path_connects_corners(solver, seed):
    maze = _generated(12, 9, seed)
    path = solver(maze, (0, 0), (11, 8))
    assert path[0] == (0, 0)
    assert path[-1] == (11, 8)
    _assert_walkable(maze, path)
    assert len(set(path)) == len(path)


@pytest.mark.parametrize("seed", [0, 4, 17])
def test_dfs_and_bfs_agree_in_perfect_maze(seed):
    maze = _generated(10, 10, seed)
    assert solve_dfs(maze, (0, 0), (9, 9)) == solve_bfs(maze, (0, 0), (9, 9))


@pytest.mark.parametrize("solver", SOLVERS)
def test_corridor(solver):
    maze = Maze(3, 1)
    _open(maze, (0, 0), Direction.RIGHT)
    _open(maze, (1, 0), Direction.RIGHT)
    assert solver(maze, (0, 0), (2, 0)) == [(0, 0), (1, 0), (2, 0)]
    assert solver(maze, (2, 0), (0, 0)) == [(2, 0), (1, 0), (0, 0)]


@pytest.mark.parametrize("solver", SOLVERS)
def test_start_equals_end(solver):
    maze = _generated(4, 4, 3)
    assert solver(maze, (2, 1), (2, 1)) == [(2, 1)]


@pytest.mark.parametrize("solver", SOLVERS)
def test_unreachable_returns_empty(solver):
    maze = Maze(4, 4)
    assert solver(maze, (0, 0), (3, 3)) == []


def test_dfs_start_outside_maze_raises():
    maze = _generated(4, 4, 3)
    with pytest.raises(IndexError):
        solve_dfs(maze, (-1, 0), (3, 3))


def test_dfs_end_outside_maze_raises():
    maze = _generated(4, 4, 3)
    with pytest.raises(IndexError):
        solve_dfs(maze, (0, 0), (4, 3))


def test_bfs_start_outside_maze_raises():
    maze = _generated(4, 4, 3)
    with pytest.raises(IndexError):
        solve_bfs(maze, (-1, 0), (3, 3))


def test_bfs_end_outside_maze_raises():
    maze = _generated(4, 4, 3)
    with pytest.raises(IndexError):
        solve_bfs(maze, (0, 0), (4, 3))


def test_bfs_finds_shortest_in_loop():
    maze = Maze(2, 2)
    _open(maze, (0, 0), Direction.RIGHT)
    _open(maze, (1, 0), Direction.DOWN)
    _open(maze, (0, 0), Direction.DOWN)
    _open(maze, (0, 1), Direction.RIGHT)
    path = solve_bfs(maze, (0, 0), (1, 0))
    assert path == [(0, 0), (1, 0)]


def test_dfs_path_is_walkable_in_loop():
    maze = Maze(2, 2)
    _open(maze, (0, 0), Direction.RIGHT)
    _open(maze, (1, 0), Direction.DOWN)
    _open(maze, (0, 0), Direction.DOWN)
    _open(maze, (0, 1), Direction.RIGHT)
    path = solve_dfs(maze, (0, 0), (1, 1))
    assert path[0] == (0, 0) and path[-1] == (1, 1)
    _assert_walkable(maze, path)