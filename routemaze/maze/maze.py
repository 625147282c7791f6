"""A character grid maze with optional curses drawing."""

from __future__ import annotations

import os
import time
from enum import Enum
from typing import ClassVar

from .cell import Cell

DRAW_DELAY = 50000
"""Default pause after each animated draw, in microseconds."""

_OFFSETS = (
    (-1, 0),  # up
    (1, 0),  # down
    (0, 1),  # right
    (0, -1),  # left
    (-1, -1),  # up-left
    (-1, 1),  # up-right
    (1, 1),  # down-right
    (1, -1),  # down-left
)

_COLOUR_PAIRS = {"#": 1, " ": 2, "S": 3, ".": 5, "*": 6, ",": 7}
_DEFAULT_PAIR = 4
_PAIR_COLOURS = ("BLACK", "WHITE", "BLUE", "RED", "GREEN", "CYAN", "YELLOW")

_SAVED_CHARS = {"S": "S", "E": "E", "#": "#", "*": "."}


class CellType(Enum):
    WALL = 0
    FLOOR = 1


def _odd(n: int) -> int:
    return n if n % 2 else n - 1


class Maze:
    """A grid of characters: ``#`` walls, spaces, ``S`` start and ``E`` end."""

    draw_delay: ClassVar[int] = DRAW_DELAY

    def __init__(self, nrows: int, ncols: int, animate: bool = False) -> None:
        rows, cols = _odd(nrows), _odd(ncols)
        self._setup(rows, cols, [["#"] * cols for _ in range(max(rows, 0))], animate)

    def _setup(self, rows: int, cols: int, grid: list[list[str]], animate: bool) -> None:
        self._rows = rows
        self._cols = cols
        self._grid = grid
        self._start: Cell | None = None
        self._end: Cell | None = None
        self.animate = animate
        self.screen = None

    @classmethod
    def from_file(cls, filename: str | os.PathLike[str], animate: bool = False) -> Maze:
        """Load a maze written as ``rows cols`` followed by one line per row."""
        with open(filename, encoding="utf-8") as handle:
            header = handle.readline().split()
            if len(header) < 2:
                raise ValueError("maze file must start with the row and column counts")
            rows, cols = int(header[0]), int(header[1])
            grid = []
            for _ in range(rows):
                line = handle.readline().rstrip("\r\n")
                grid.append(list(line[:cols].ljust(cols)))

        maze = cls.__new__(cls)
        maze._setup(rows, cols, grid, animate)
        for i, row in enumerate(grid):
            for j, char in enumerate(row):
                if char == "S":
                    maze._start = Cell(i, j)
                elif char == "E":
                    maze._end = Cell(i, j)
        return maze

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def start(self) -> Cell | None:
        return self._start

    @property
    def end(self) -> Cell | None:
        return self._end

    def __getitem__(self, key: tuple[int, int]) -> str:
        r, c = key
        return self._grid[r][c]

    def __setitem__(self, key: tuple[int, int], value: str) -> None:
        r, c = key
        self._grid[r][c] = value

    def index(self, cell: Cell) -> int:
        """Return the row-major index of a cell."""
        return cell.col + cell.row * self._cols

    def set_start(self, r: int, c: int) -> None:
        """Move the start to a pathable cell; other cells are ignored."""
        if self.is_pathable(r, c):
            if self._start is not None:
                self._grid[self._start.row][self._start.col] = " "
            self._start = Cell(r, c)
            self._grid[r][c] = "S"

    def set_end(self, r: int, c: int) -> None:
        """Move the end to a pathable cell; other cells are ignored."""
        if self.is_pathable(r, c):
            if self._end is not None:
                self._grid[self._end.row][self._end.col] = " "
            self._end = Cell(r, c)
            self._grid[r][c] = "E"

    def init_curses(self) -> None:
        """Start the curses screen when the maze is animated."""
        if not self.animate:
            return
        import curses

        screen = curses.initscr()
        curses.cbreak()
        curses.noecho()
        screen.keypad(True)
        curses.mousemask(curses.BUTTON1_CLICKED)
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        curses.start_color()
        for number, name in enumerate(_PAIR_COLOURS, start=1):
            colour = getattr(curses, f"COLOR_{name}")
            curses.init_pair(number, colour, colour)
        self.screen = screen

    def end_curses(self) -> None:
        """Restore the terminal when the maze is animated."""
        if self.animate and self.screen is not None:
            import curses

            curses.endwin()
            self.screen = None

    def message(self, msg: str) -> None:
        """Show a message on the line below the maze."""
        if not self.animate or self.screen is None:
            return
        import curses

        try:
            self.screen.move(self._rows + 1, 0)
            self.screen.clrtoeol()
            self.screen.addstr(self._rows + 1, 0, msg)
        except curses.error:
            pass
        self.screen.refresh()

    def render(self) -> str:
        """Return the maze in its file form; trail marks other than ``*`` become spaces."""
        lines = [f"{self._rows} {self._cols}\n"]
        for row in self._grid:
            lines.append("".join(_SAVED_CHARS.get(char, " ") for char in row) + "\n")
        return "".join(lines)

    def save(self, filename: str | os.PathLike[str]) -> None:
        """Write the maze to a file in the form ``from_file`` reads."""
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(self.render())

    def draw(self, delay: int = 0) -> None:
        """Paint the grid when animated, then pause for the class-wide ``draw_delay``."""
        if not self.animate or self.screen is None:
            return
        import curses

        for i, row in enumerate(self._grid):
            for j, char in enumerate(row):
                attr = curses.color_pair(_COLOUR_PAIRS.get(char, _DEFAULT_PAIR))
                try:
                    self.screen.addstr(i + 1, j + 1, char, attr)
                except curses.error:
                    pass
        self.screen.refresh()
        time.sleep(self.draw_delay / 1_000_000)

    def neighbors(self, cell: Cell, cell_type: CellType, diag: bool = False) -> list[Cell]:
        """Return adjacent cells of the given type, each with ``cell`` as parent.

        The order is up, down, right, left, then the diagonals when ``diag`` is set.
        """
        result = []
        for dr, dc in _OFFSETS[: 8 if diag else 4]:
            r, c = cell.row + dr, cell.col + dc
            if (cell_type is CellType.FLOOR and self.is_pathable(r, c)) or (
                cell_type is CellType.WALL and self.is_wall(r, c)
            ):
                result.append(Cell(r, c, cell))
        return result

    def is_pathable(self, r: int, c: int) -> bool:
        """True for an in-bounds cell that is neither a wall nor already visited."""
        return self.is_valid(r, c) and self._grid[r][c] not in ("#", ".")

    def is_valid(self, r: int, c: int) -> bool:
        return 0 <= r < self._rows and 0 <= c < self._cols

    def is_wall(self, r: int, c: int) -> bool:
        return self.is_valid(r, c) and self._grid[r][c] == "#"

    def clear(self) -> None:
        """Wipe every non-wall cell, then put back the start and end marks."""
        for row in self._grid:
            for j, char in enumerate(row):
                if char != "#":
                    row[j] = " "
        if self._start is not None:
            self._grid[self._start.row][self._start.col] = "S"
        if self._end is not None:
            self._grid[self._end.row][self._end.col] = "E"