"""A player walking through a maze two cells at a time."""

from __future__ import annotations

from enum import Enum

from .maze import Maze


class Direction(Enum):
    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3


_STEPS = {
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
}


class Player:
    """A position in the maze, shown as ``S``, leaving a ``.`` trail."""

    def __init__(self, row: int = 0, col: int = 0) -> None:
        self.row = row
        self.col = col

    def move(self, maze: Maze, direction: Direction) -> bool:
        """Step two cells in a direction; return True when the end is reached.

        Stepping back onto the trail erases it. Blocked moves do nothing.
        """
        dr, dc = _STEPS[Direction(direction)]
        mid = (self.row + dr, self.col + dc)
        if not (maze.is_valid(*mid) and maze[mid] != "#"):
            return False

        here = (self.row, self.col)
        target = (self.row + 2 * dr, self.col + 2 * dc)
        if maze[target] == "E":
            maze[mid] = "."
            maze[here] = "."
            return True

        trail = " " if maze[target] == "." else "."
        maze[mid] = trail
        maze[here] = trail
        self.row, self.col = target
        maze[target] = "S"
        return False