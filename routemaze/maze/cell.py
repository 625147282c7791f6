"""Grid positions that remember the cell they were reached from."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Cell:
    """A row and column in a maze grid, with an optional parent cell.

    Two cells are equal when they share a row and a column; the parent
    is not compared.
    """

    row: int = 0
    col: int = 0
    parent: Cell | None = field(default=None, repr=False)

    def child(self) -> Cell:
        """Return the cell one more step away from the parent, in a straight line."""
        if self.parent is None:
            raise ValueError("cell has no parent to step away from")
        return Cell(2 * self.row - self.parent.row, 2 * self.col - self.parent.col)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.row == other.row and self.col == other.col

    def __hash__(self) -> int:
        return hash((self.row, self.col))