# mazerunner

A small maze game. Each maze is a random perfect maze, built by a depth-first
backtracker, so any two cells are joined by exactly one path. Walk from the
green start in the top-left corner to the red goal in the bottom-right corner,
or have the game solve the maze for you with depth-first or breadth-first search.

## Installation

```
pip install .
```

## Playing

```
mazerunner
```

Options:

| Option          | Default | Meaning                                   |
|-----------------|---------|-------------------------------------------|
| `--width N`     | 40      | maze width in cells                       |
| `--height N`    | 30      | maze height in cells                      |
| `--seed N`      | random  | seed for maze generation                  |

Width and height must be positive. Each cell is drawn 20 pixels square, with a
100-pixel panel below the maze for messages.

Controls:

| Key         | Action                                                  |
|-------------|---------------------------------------------------------|
| Arrow keys  | Move the player through gaps in the walls               |
| `R`         | Build a new maze and put the player back at the start   |
| `D`         | Solve with depth-first search and show the path         |
| `B`         | Solve with breadth-first search and show the path       |

The time each solver takes, in whole milliseconds, is shown below the maze and
is also printed to standard output. Once you reach the goal, "You reached the
goal!" is shown below the maze and printed once; the player cannot move again
until a new maze is built with `R`.

## Using the library

The maze and the solvers can be used without the window:

```python
import random

from mazerunner.maze import Maze
from mazerunner.solvers import solve_bfs, solve_dfs

maze = Maze(40, 30, random.Random(1))
maze.generate()

path = solve_bfs(maze, (0, 0), (39, 29))
print(path[0], path[-1], len(path))
```

`Maze(width, height, rng=None)` raises `ValueError` unless both dimensions are
positive. A new maze has every wall closed until `generate()` is called;
`generate()` closes every wall again and carves a fresh maze from `(0, 0)`,
drawing its randomness from `rng` (a `random.Random`, or a fresh one if none
is given).

`Maze.get(x, y)` returns the `Cell` at that position and raises `IndexError`
outside the grid; a cell's `walls` list is indexed by `Direction` (`UP`,
`RIGHT`, `DOWN`, `LEFT`). `Direction.offset()` gives the `(dx, dy)` step, with
y growing downwards, and `Direction.opposite()` the reverse direction.
`Maze.is_valid(x, y)` tells whether a position lies inside the grid.

`solve_dfs(maze, start, end)` and `solve_bfs(maze, start, end)` return the list
of `(x, y)` cells from the start to the end, both included, or an empty list
when the end cannot be reached. They raise `IndexError` if either point lies
outside the maze. Breadth-first search returns a shortest path; in a generated
maze there is only one path, so both solvers return the same one.

The game state can also be driven without a display through `Game` from
`mazerunner.game`:

- `Game(width=40, height=30, rng=None)` builds and generates a maze, with the
  player at `(0, 0)` and the goal at the bottom-right corner.
- `move(direction)` steps the player one cell unless a wall is in the way or
  the game is already won, and returns whether it moved; `won` becomes true
  on reaching `goal`.
- `regenerate()` builds a new maze and resets the player, `path`, `won` and
  the timing texts.
- `solve_dfs()` and `solve_bfs()` solve from the start to the goal, store the
  result in `path`, update `dfs_time_text` or `bfs_time_text`, and return the
  path.

## Running the tests

```
pip install ".[test]"
pytest
```