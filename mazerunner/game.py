"""Interactive maze game: walk from the top-left to the bottom-right corner."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable

from mazerunner.maze import Direction, Maze
from mazerunner.solvers import Point, solve_bfs, solve_dfs

CELL_SIZE = 20
WALL_THICKNESS = 4
PANEL_HEIGHT = 100
DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 30

DFS_IDLE_TEXT = "DFS Time: Not calculated"
BFS_IDLE_TEXT = "BFS Time: Not calculated"
WIN_TEXT = "You reached the goal!"


class Game:
    """Game state: the maze, the player's position and the last solver results."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 rng: random.Random | None = None) -> None:
        self.maze = Maze(width, height, rng)
        self.goal: Point = (width - 1, height - 1)
        self.regenerate()

    def _check_goal(self) -> None:
        if self.player == self.goal:
            self.won = True

    def move(self, direction: Direction) -> bool:
        """Step the player one cell if no wall is in the way; return whether it moved."""
        if self.won:
            return False
        x, y = self.player
        if self.maze.get(x, y).walls[direction]:
            return False
        dx, dy = direction.offset()
        if not self.maze.is_valid(x + dx, y + dy):
            return False
        self.player = (x + dx, y + dy)
        self._check_goal()
        return True

    def regenerate(self) -> None:
        """Build a new maze and reset the player, the path and the timings."""
        self.maze.generate()
        self.player: Point = (0, 0)
        self.won = False
        self.path: list[Point] = []
        self.dfs_time_text = DFS_IDLE_TEXT
        self.bfs_time_text = BFS_IDLE_TEXT
        self._check_goal()

    def _timed(self, solver: Callable[..., list[Point]]) -> tuple[list[Point], int]:
        started = time.perf_counter()
        path = solver(self.maze, (0, 0), self.goal)
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        self.path = path
        return path, elapsed_ms

    def solve_dfs(self) -> list[Point]:
        """Solve depth-first, keep the path for display and record the time taken."""
        path, elapsed_ms = self._timed(solve_dfs)
        self.dfs_time_text = f"DFS Time: {elapsed_ms} milliseconds"
        return path

    def solve_bfs(self) -> list[Point]:
        """Solve breadth-first, keep the path for display and record the time taken."""
        path, elapsed_ms = self._timed(solve_bfs)
        self.bfs_time_text = f"BFS Time: {elapsed_ms} milliseconds"
        return path


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mazerunner", description="Play a maze game.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="maze width in cells")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="maze height in cells")
    parser.add_argument("--seed", type=int, default=None, help="random seed for maze generation")
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error("width and height must be positive")
    return args


def _draw(pygame, screen, font, game: Game) -> None:
    black, white = (0, 0, 0), (255, 255, 255)
    quarter, half = CELL_SIZE // 4, CELL_SIZE // 2
    screen.fill(white)

    maze = game.maze
    for x in range(maze.width):
        for y in range(maze.height):
            x1, y1 = x * CELL_SIZE, y * CELL_SIZE
            x2, y2 = x1 + CELL_SIZE, y1 + CELL_SIZE
            walls = maze.get(x, y).walls
            if walls[Direction.UP]:
                pygame.draw.rect(screen, black, (x1, y1, CELL_SIZE, WALL_THICKNESS))
            if walls[Direction.RIGHT]:
                pygame.draw.rect(screen, black, (x2 - WALL_THICKNESS, y1, WALL_THICKNESS, CELL_SIZE))
            if walls[Direction.DOWN]:
                pygame.draw.rect(screen, black, (x1, y2 - WALL_THICKNESS, CELL_SIZE, WALL_THICKNESS))
            if walls[Direction.LEFT]:
                pygame.draw.rect(screen, black, (x1, y1, WALL_THICKNESS, CELL_SIZE))

    for px, py in game.path:
        pygame.draw.rect(screen, (0, 0, 255),
                         (px * CELL_SIZE + quarter, py * CELL_SIZE + quarter, half, half))

    for (cx, cy), colour in (((0, 0), (0, 255, 0)), (game.goal, (255, 0, 0))):
        centre = (cx * CELL_SIZE + half, cy * CELL_SIZE + half)
        pygame.draw.circle(screen, white, centre, quarter + 2)
        pygame.draw.circle(screen, colour, centre, quarter)

    px, py = game.player
    player_rect = pygame.Rect(px * CELL_SIZE + quarter, py * CELL_SIZE + quarter, half, half)
    pygame.draw.rect(screen, black, player_rect.inflate(4, 4))
    pygame.draw.rect(screen, (255, 255, 0), player_rect)

    panel_top = maze.height * CELL_SIZE
    lines = [(game.dfs_time_text, 10), (game.bfs_time_text, 40)]
    if game.won:
        lines.append((WIN_TEXT, 70))
    for text, offset in lines:
        screen.blit(font.render(text, True, black), (10, panel_top + offset))

    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    args = _parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    game = Game(args.width, args.height, rng)

    import pygame

    moves = {
        pygame.K_UP: Direction.UP,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (args.width * CELL_SIZE, args.height * CELL_SIZE + PANEL_HEIGHT))
        pygame.display.set_caption("Maze Game")
        font = pygame.font.SysFont("arial", 20)
        clock = pygame.time.Clock()

        announced = game.won
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in moves:
                        game.move(moves[event.key])
                    elif event.key == pygame.K_r:
                        game.regenerate()
                        announced = game.won
                    elif event.key == pygame.K_d:
                        game.solve_dfs()
                        print(game.dfs_time_text)
                    elif event.key == pygame.K_b:
                        game.solve_bfs()
                        print(game.bfs_time_text)

            if game.won and not announced:
                announced = True
                print(WIN_TEXT)

            _draw(pygame, screen, font, game)
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())