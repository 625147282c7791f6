import pytest

from routemaze.maze.cell import Cell


@pytest.mark.parametrize(
    "parent, cell",
    [
        (Cell(0, 0), Cell(1, 0)),
        (Cell(0, 0), Cell(0, 1)),
        (Cell(4, 4), Cell(3, 4)),
        (Cell(4, 4), Cell(4, 3)),
    ],
)
def test_child_continues_in_the_same_direction(parent, cell):
    cell.parent = parent
    child = cell.child()
    assert child.row - cell.row == cell.row - parent.row
    assert child.col - cell.col == cell.col - parent.col


def test_child_has_no_parent():
    child = Cell(1, 0, Cell(0, 0)).child()
    assert child.parent is None


def test_child_without_parent_raises():
    with pytest.raises(ValueError):
        Cell(3, 3).child()


def test_equality_ignores_parent():
    assert Cell(2, 5, Cell(1, 5)) == Cell(2, 5)
    assert Cell(2, 5) != Cell(5, 2)


def test_equal_cells_hash_alike():
    cells = {Cell(1, 1), Cell(1, 1, Cell(0, 1)), Cell(1, 2)}
    assert len(cells) == 2