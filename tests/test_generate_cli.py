import pytest

from routemaze.maze.generate_cli import build_parser, main
from routemaze.maze.maze import Maze
from routemaze.maze.solver import SolveAlgorithm, Solver


@pytest.mark.parametrize("name", ["dfs", "prims", "kruskals"])
def test_generates_solvable_maze(tmp_path, name):
    out = tmp_path / "maze.txt"
    assert main(["-r", "7", "-c", "9", "-a", name, "-f", str(out)]) == 0
    maze = Maze.from_file(out)
    assert (maze.rows, maze.cols) == (7, 9)
    assert maze[0, 0] == "S"
    assert maze[6, 8] == "E"
    assert Solver().first_search(maze, SolveAlgorithm.BFS) is True


def test_even_sizes_are_made_odd(tmp_path):
    out = tmp_path / "maze.txt"
    assert main(["--rows", "8", "--cols", "6", "--algorithm", "prims", "--file", str(out)]) == 0
    maze = Maze.from_file(out)
    assert (maze.rows, maze.cols) == (7, 5)


def test_unknown_algorithm_still_generates(tmp_path):
    out = tmp_path / "maze.txt"
    assert main(["-r", "5", "-c", "5", "-a", "mystery", "-f", str(out)]) == 0
    maze = Maze.from_file(out)
    assert Solver().first_search(maze, SolveAlgorithm.BFS) is True


def test_missing_algorithm(tmp_path, capsys):
    out = tmp_path / "maze.txt"
    assert main(["-r", "5", "-c", "5", "-f", str(out)]) == 0
    assert "Must specify an algorithm (prims)" in capsys.readouterr().err
    assert not out.exists()


def test_speed_sets_draw_delay():
    original_ms = Maze.draw_delay // 1000
    try:
        assert main(["-s", "3"]) == 0
        assert Maze.draw_delay == 3000
    finally:
        main(["-s", str(original_ms)])
    assert Maze.draw_delay == original_ms * 1000


def test_parser_options():
    args = build_parser().parse_args(["-r", "11", "--animate", "-a", "dfs"])
    assert args.rows == 11
    assert args.cols == -1
    assert args.animate is True
    assert args.algorithm == "dfs"
    assert args.file is None