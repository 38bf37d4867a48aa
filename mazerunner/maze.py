"""Rectangular grid maze built with a randomized depth-first backtracker."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum


class Direction(IntEnum):
    """Compass direction; the value indexes a cell's wall list."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def offset(self) -> tuple[int, int]:
        """Return the (dx, dy) step for this direction; y grows downwards."""
        return _OFFSETS[self]

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return Direction((self.value + 2) % 4)


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}


def _closed_walls() -> list[bool]:
    return [True, True, True, True]


@dataclass
class Cell:
    """One maze cell; ``walls`` is indexed by :class:`Direction`."""

    visited: bool = False
    walls: list[bool] = field(default_factory=_closed_walls)


class Maze:
    """A width x height grid of cells addressed as (x, y)."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"maze dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self._grid = [[Cell() for _ in range(height)] for _ in range(width)]

    def generate(self) -> None:
        """Close every wall, then carve a perfect maze starting from (0, 0)."""
        for column in self._grid:
            for cell in column:
                cell.visited = False
                cell.walls = _closed_walls()

        self._grid[0][0].visited = True
        stack = [(0, 0)]
        while stack:
            x, y = stack[-1]
            directions = list(Direction)
            self._rng.shuffle(directions)
            for direction in directions:
                dx, dy = direction.offset()
                nx, ny = x + dx, y + dy
                if self.is_valid(nx, ny) and not self._grid[nx][ny].visited:
                    neighbour = self._grid[nx][ny]
                    self._grid[x][y].walls[direction] = False
                    neighbour.walls[direction.opposite()] = False
                    neighbour.visited = True
                    stack.append((nx, ny))
                    break
            else:
                stack.pop()

    def get(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y)."""
        if not self.is_valid(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} maze")
        return self._grid[x][y]

    def is_valid(self, x: int, y: int) -> bool:
        """Tell whether (x, y) lies inside the maze."""
        return 0 <= x < self.width and 0 <= y < self.height