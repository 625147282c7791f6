"""Maze solving by breadth-first, depth-first, backtracking and A* search."""

from __future__ import annotations

import heapq
import itertools
import math
from collections import deque
from enum import Enum

from .cell import Cell
from .maze import CellType, Maze
from .player import Direction, Player

MOUSE_MESSAGE = (
    "Click to move start, ctrl-click to move finish, "
    "or press any other key to end"
)
PLAY_MESSAGE = "Move with the arrow keys, or press q to quit"
SUCCESS_MESSAGE = "Success!"
DIAGONAL_COST = 1.4


class SolveAlgorithm(Enum):
    BFS = 0
    DFS = 1
    BACKTRACKING = 2
    ASTAR = 3
    PLAY = 4


def manhattan_distance(first: Cell, second: Cell) -> float:
    """Sum of the row and column differences between two cells."""
    return float(abs(first.row - second.row) + abs(first.col - second.col))


def real_distance(first: Cell, second: Cell) -> float:
    """Straight-line distance between two cells."""
    return math.hypot(first.row - second.row, first.col - second.col)


def _endpoints(maze: Maze) -> tuple[Cell, Cell]:
    if maze.start is None or maze.end is None:
        raise ValueError("maze needs both a start and an end")
    return maze.start, maze.end


class Solver:
    """Finds a way from ``S`` to ``E``, marking visited cells and the final path.

    Marks left in the grid: ``,`` for cells queued, ``.`` for cells visited
    and ``*`` for the path found.
    """

    def __init__(self, diag: bool = False) -> None:
        self.allow_diag = diag

    def solve(self, maze: Maze, algorithm: SolveAlgorithm, animate: bool = True) -> bool:
        """Run a search on the maze; return whether the end was reached."""
        algorithm = SolveAlgorithm(algorithm)
        if maze.screen is None:
            maze.init_curses()
        try:
            found = self._run(maze, algorithm)
            if algorithm is not SolveAlgorithm.PLAY:
                self.mouse_control(maze, algorithm, animate)
        finally:
            maze.end_curses()
        return found

    def _run(self, maze: Maze, algorithm: SolveAlgorithm) -> bool:
        if algorithm in (SolveAlgorithm.BFS, SolveAlgorithm.DFS):
            return self.first_search(maze, algorithm)
        if algorithm is SolveAlgorithm.BACKTRACKING:
            return self.backtrack(maze)
        if algorithm is SolveAlgorithm.ASTAR:
            return self.astar(maze)
        return self.player_control(maze)

    def mouse_control(self, maze: Maze, algorithm: SolveAlgorithm, animate: bool = True) -> None:
        """Let the user click to move the start or end and solve again, until another key."""
        if not animate:
            return
        if maze.screen is None:
            maze.init_curses()
        if maze.screen is None:
            return
        import curses

        algorithm = SolveAlgorithm(algorithm)
        maze.draw()
        maze.message(MOUSE_MESSAGE)
        while maze.screen.getch() == curses.KEY_MOUSE:
            try:
                _, x, y, _, state = curses.getmouse()
            except curses.error:
                break
            row, col = y - 1, x - 1
            maze.clear()
            if not maze.is_pathable(row, col):
                continue
            start, end = _endpoints(maze)
            if state == curses.BUTTON1_CLICKED:
                maze.set_start(row, col)
                maze.set_end(end.row, end.col)
            elif state == curses.BUTTON1_CLICKED | curses.BUTTON_CTRL:
                maze.set_end(row, col)
                maze.set_start(start.row, start.col)
            self._run(maze, algorithm)
            maze.draw()
            maze.message(MOUSE_MESSAGE)

    def backtrack(self, maze: Maze) -> bool:
        """Depth-first walk that undoes dead ends and marks the successful path."""
        start, end = _endpoints(maze)
        if start == end:
            return True
        frames = [(start, iter(maze.neighbors(start, CellType.FLOOR, self.allow_diag)))]
        while frames:
            _, pending = frames[-1]
            step = next(pending, None)
            if step is None:
                failed, _ = frames.pop()
                if frames:
                    maze[failed.row, failed.col] = ","
                    maze.draw(Maze.draw_delay)
                    maze[failed.row, failed.col] = " "
                continue
            if step == end:
                for cell, _ in reversed(frames[1:]):
                    maze[cell.row, cell.col] = "*"
                    maze.draw(Maze.draw_delay)
                return True
            maze[step.row, step.col] = ","
            maze.draw(Maze.draw_delay)
            maze[step.row, step.col] = "."
            frames.append(
                (step, iter(maze.neighbors(step, CellType.FLOOR, self.allow_diag)))
            )
        return False

    def first_search(self, maze: Maze, algorithm: SolveAlgorithm) -> bool:
        """Breadth-first or depth-first search from the start to the end."""
        algorithm = SolveAlgorithm(algorithm)
        if algorithm not in (SolveAlgorithm.BFS, SolveAlgorithm.DFS):
            raise ValueError(f"not a first search: {algorithm.name}")
        start, end = _endpoints(maze)
        breadth = algorithm is SolveAlgorithm.BFS
        frontier: deque[Cell] = deque([start])

        while frontier:
            current = frontier.popleft() if breadth else frontier.pop()
            if current == end:
                node: Cell | None = current
                while node is not None:
                    if maze[node.row, node.col] == ".":
                        maze[node.row, node.col] = "*"
                    maze.draw(Maze.draw_delay)
                    node = node.parent
                return True

            if maze[current.row, current.col] != "S":
                maze[current.row, current.col] = "."
            for neighbor in maze.neighbors(current, CellType.FLOOR, self.allow_diag):
                if maze[neighbor.row, neighbor.col] != "E":
                    maze[neighbor.row, neighbor.col] = ","
                maze.draw(Maze.draw_delay)
                frontier.append(neighbor)
        return False

    def astar(self, maze: Maze) -> bool:
        """A* search guided by the Manhattan distance to the end."""
        start, end = _endpoints(maze)
        order = itertools.count()
        frontier: list[tuple[float, int, Cell]] = [(0.0, next(order), start)]
        cost_so_far = {maze.index(start): 0.0}

        while frontier:
            _, _, current = heapq.heappop(frontier)
            if current == end:
                node: Cell | None = current
                while node is not None:
                    if maze[node.row, node.col] == ".":
                        maze[node.row, node.col] = "*"
                        maze.draw(Maze.draw_delay)
                    node = node.parent
                return True

            if maze[current.row, current.col] != "S":
                maze[current.row, current.col] = "."
                maze.draw(Maze.draw_delay)

            base = cost_so_far[maze.index(current)]
            for neighbor in maze.neighbors(current, CellType.FLOOR, self.allow_diag):
                diagonal = neighbor.row != current.row and neighbor.col != current.col
                new_cost = base + (DIAGONAL_COST if diagonal else 1.0)
                key = maze.index(neighbor)
                if key not in cost_so_far or new_cost < cost_so_far[key]:
                    estimate = int(manhattan_distance(neighbor, end))
                    heapq.heappush(frontier, (estimate + new_cost, next(order), neighbor))
                    cost_so_far[key] = new_cost
                    if maze[neighbor.row, neighbor.col] != "E":
                        maze[neighbor.row, neighbor.col] = ","
                        maze.draw(Maze.draw_delay)
        return False

    def player_control(self, maze: Maze) -> bool:
        """Let the user walk with the arrow keys; return whether the end was reached."""
        if maze.screen is None:
            raise RuntimeError("playing needs an animated maze")
        import curses

        keys = {
            curses.KEY_UP: Direction.UP,
            curses.KEY_DOWN: Direction.DOWN,
            curses.KEY_LEFT: Direction.LEFT,
            curses.KEY_RIGHT: Direction.RIGHT,
        }
        player = Player(0, 0)
        maze.draw()
        reached = False
        done = False
        while not done:
            maze.message(PLAY_MESSAGE)
            key = maze.screen.getch()
            if key in keys:
                reached = done = player.move(maze, keys[key])
            elif key == ord("q"):
                done = True
            maze.draw()
        maze.message(SUCCESS_MESSAGE)
        return reached