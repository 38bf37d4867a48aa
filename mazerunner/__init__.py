"""A maze game: random maze generation, depth-first and breadth-first solvers, and a pygame front end."""

__version__ = "0.1.0"