import pytest

from routemaze.maze.cell import Cell
from routemaze.maze.maze import Maze
from routemaze.maze.solver import (
    SolveAlgorithm,
    Solver,
    manhattan_distance,
    real_distance,
)

BRANCH = ["S   E", "## ##", "## ##"]
CORRIDOR = ["S    ", "#### ", "     ", " ####", "    E"]
DIAGONAL = ["S##", "# #", "##E"]
SEARCHES = [
    SolveAlgorithm.BFS,
    SolveAlgorithm.DFS,
    SolveAlgorithm.BACKTRACKING,
    SolveAlgorithm.ASTAR,
]


def load(tmp_path, lines):
    path = tmp_path / "maze.txt"
    path.write_text(
        f"{len(lines)} {len(lines[0])}\n" + "".join(line + "\n" for line in lines)
    )
    return Maze.from_file(path)


def cells_with(maze, char):
    return {
        (r, c) for r in range(maze.rows) for c in range(maze.cols) if maze[r, c] == char
    }


@pytest.mark.parametrize("algorithm", SEARCHES)
def test_solve_marks_path_and_skips_dead_end(tmp_path, algorithm):
    maze = load(tmp_path, BRANCH)
    assert Solver().solve(maze, algorithm, animate=False) is True
    stars = cells_with(maze, "*")
    assert {(0, 1), (0, 2), (0, 3)} <= stars
    assert (1, 2) not in stars
    assert (2, 2) not in stars
    assert maze[0, 4] == "E"


def test_backtrack_resets_dead_end(tmp_path):
    maze = load(tmp_path, BRANCH)
    assert Solver().backtrack(maze) is True
    assert maze[1, 2] == " "
    assert maze[2, 2] == " "
    assert maze[0, 0] == "S"
    assert cells_with(maze, "*") == {(0, 1), (0, 2), (0, 3)}


def test_backtrack_marks_whole_corridor(tmp_path):
    maze = load(tmp_path, CORRIDOR)
    open_cells = cells_with(maze, " ")
    assert Solver().backtrack(maze) is True
    assert cells_with(maze, "*") == open_cells


@pytest.mark.parametrize("algorithm", SEARCHES)
def test_no_path(tmp_path, algorithm):
    maze = load(tmp_path, ["S#E"])
    assert Solver().solve(maze, algorithm, animate=False) is False


def test_diagonal_only_with_diag(tmp_path):
    assert Solver().first_search(load(tmp_path, DIAGONAL), SolveAlgorithm.BFS) is False
    maze = load(tmp_path, DIAGONAL)
    assert Solver(diag=True).first_search(maze, SolveAlgorithm.BFS) is True
    assert maze[1, 1] == "*"


def test_astar_with_diag(tmp_path):
    maze = load(tmp_path, DIAGONAL)
    assert Solver(diag=True).astar(maze) is True
    assert maze[1, 1] == "*"


def test_astar_open_grid_path_length(tmp_path):
    maze = load(tmp_path, ["S  ", "   ", "  E"])
    assert Solver().astar(maze) is True
    expected = int(manhattan_distance(maze.start, maze.end)) - 1
    assert len(cells_with(maze, "*")) == expected
    assert maze[0, 0] == "S"


def test_first_search_rejects_other_algorithm(tmp_path):
    with pytest.raises(ValueError):
        Solver().first_search(load(tmp_path, BRANCH), SolveAlgorithm.ASTAR)


def test_missing_endpoints():
    with pytest.raises(ValueError):
        Solver().first_search(Maze(3, 3), SolveAlgorithm.BFS)


def test_play_needs_screen(tmp_path):
    with pytest.raises(RuntimeError):
        Solver().player_control(load(tmp_path, BRANCH))
    with pytest.raises(RuntimeError):
        Solver().solve(load(tmp_path, BRANCH), SolveAlgorithm.PLAY, animate=False)


def test_mouse_control_without_animation_leaves_maze(tmp_path):
    maze = load(tmp_path, BRANCH)
    before = maze.render()
    assert Solver().mouse_control(maze, SolveAlgorithm.BFS, animate=False) is None
    assert maze.render() == before


def test_distances():
    a, b = Cell(0, 0), Cell(3, 4)
    assert manhattan_distance(a, b) == 7.0
    assert real_distance(a, b) == pytest.approx(5.0)
    assert manhattan_distance(b, a) == manhattan_distance(a, b)
    assert real_distance(a, a) == 0.0