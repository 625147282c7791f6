"""Random maze generation by depth-first search, Prim's and Kruskal's algorithms."""

from __future__ import annotations

import random
from enum import Enum
from typing import TypeVar

from .cell import Cell
from .maze import CellType, Maze
from .union_find import UnionFind

FINISHED_MESSAGE = "Finished generation. Press any key to continue..."

_T = TypeVar("_T")


class GenerateAlgorithm(Enum):
    DFS = 0
    PRIMS = 1
    KRUSKALS = 2


class Generator:
    """Carves perfect mazes whose rooms sit on even rows and columns."""

    def __init__(self, rows: int, cols: int, rng: random.Random | None = None) -> None:
        self.rows = rows if rows % 2 else rows - 1
        self.cols = cols if cols % 2 else cols - 1
        self._rng = rng if rng is not None else random.Random()

    def generate(self, algorithm: GenerateAlgorithm, animate: bool = True) -> Maze:
        """Build a maze with ``S`` at the top left and ``E`` at the bottom right."""
        algorithm = GenerateAlgorithm(algorithm)
        if self.rows < 1 or self.cols < 1:
            raise ValueError("maze needs at least one row and one column")
        carve = {
            GenerateAlgorithm.DFS: self._dfs,
            GenerateAlgorithm.PRIMS: self._prims,
            GenerateAlgorithm.KRUSKALS: self._kruskals,
        }[algorithm]

        maze = Maze(self.rows, self.cols, animate)
        maze.init_curses()
        try:
            carve(maze)
            maze.message(FINISHED_MESSAGE)
            if animate and maze.screen is not None:
                maze.screen.getch()
        finally:
            maze.end_curses()
        return maze

    def _pop_random(self, items: list[_T]) -> _T:
        return items.pop(self._rng.randrange(len(items)))

    def _push_shuffled(self, stack: list[Cell], cells: list[Cell]) -> None:
        while cells:
            stack.append(self._pop_random(cells))

    def _open_passage(self, maze: Maze, wall: Cell, room: Cell) -> None:
        maze[wall.row, wall.col] = " "
        maze[room.row, room.col] = "E"
        maze.draw(Maze.draw_delay)
        maze[room.row, room.col] = " "

    def _prims(self, maze: Maze) -> None:
        start = Cell(0, 0)
        maze[0, 0] = "S"
        frontier = [Cell(1, 0, start), Cell(0, 1, start)]
        while frontier:
            wall = self._pop_random(frontier)
            room = wall.child()
            if maze.is_wall(room.row, room.col):
                maze[wall.row, wall.col] = " "
                maze[room.row, room.col] = "E"
                frontier.extend(maze.neighbors(room, CellType.WALL))
                maze.draw(Maze.draw_delay)
                maze[room.row, room.col] = " "
        maze[self.rows - 1, self.cols - 1] = "E"
        maze.draw()

    def _dfs(self, maze: Maze) -> None:
        start = Cell(0, 0)
        maze[0, 0] = "S"
        maze.draw(Maze.draw_delay)
        stack: list[Cell] = []
        self._push_shuffled(stack, maze.neighbors(start, CellType.WALL))
        while stack:
            wall = stack.pop()
            room = wall.child()
            if maze.is_wall(room.row, room.col):
                self._open_passage(maze, wall, room)
                self._push_shuffled(stack, maze.neighbors(room, CellType.WALL))
        maze[self.rows - 1, self.cols - 1] = "E"
        maze.draw()

    def _kruskals(self, maze: Maze) -> None:
        nodes = [(r, c) for r in range(0, self.rows, 2) for c in range(0, self.cols, 2)]
        node_cols = self.cols // 2 + 1
        edges = []
        for index, (r, c) in enumerate(nodes):
            if c != self.cols - 1:
                edges.append((index, index + 1))
            if r != self.rows - 1:
                edges.append((index, index + node_cols))

        sets = UnionFind(len(nodes))
        joined = 0
        while joined < len(nodes) - 1:
            first, second = self._pop_random(edges)
            x, y = sets.find(first), sets.find(second)
            if x == y:
                continue
            (r1, c1), (r2, c2) = nodes[first], nodes[second]
            cells = [(r1, c1), (r2, c2), ((r1 + r2) // 2, (c1 + c2) // 2)]
            for cell in cells:
                maze[cell] = "E"
            maze.draw(Maze.draw_delay)
            for cell in cells:
                maze[cell] = " "
            sets.union(x, y)
            joined += 1

        maze[0, 0] = "S"
        maze[self.rows - 1, self.cols - 1] = "E"
        maze.draw()