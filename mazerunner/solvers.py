"""Path finding through a :class:`~mazerunner.maze.Maze`."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

from mazerunner.maze import Direction, Maze

Point = tuple[int, int]


def _search(maze: Maze, start: Point, end: Point, take: Callable[[deque], Point]) -> list[Point]:
    start = tuple(start)
    end = tuple(end)
    for x, y in (start, end):
        if not maze.is_valid(x, y):
            raise IndexError(f"point ({x}, {y}) is outside the maze")

    frontier: deque[Point] = deque([start])
    parent: dict[Point, Point | None] = {start: None}

    while frontier:
        current = take(frontier)
        if current == end:
            path = []
            node: Point | None = current
            while node is not None:
                path.append(node)
                node = parent[node]
            path.reverse()
            return path

        x, y = current
        cell = maze.get(x, y)
        for direction in Direction:
            if cell.walls[direction]:
                continue
            dx, dy = direction.offset()
            neighbour = (x + dx, y + dy)
            if neighbour not in parent:
                parent[neighbour] = current
                frontier.append(neighbour)

    return []


def solve_dfs(maze: Maze, start: Point, end: Point) -> list[Point]:
    """Find a path from start to end depth-first; empty if there is none."""
    return _search(maze, start, end, deque.pop)


def solve_bfs(maze: Maze, start: Point, end: Point) -> list[Point]:
    """Find a shortest path from start to end breadth-first; empty if there is none."""
    return _search(maze, start, end, deque.popleft)