import pytest

from routemaze.maze.maze import Maze
from routemaze.maze.solve_cli import build_parser, main

CORRIDOR = ["S    ", "#### ", "     ", " ####", "    E"]
DIAGONAL = ["S##", "# #", "##E"]


def write(tmp_path, lines, name="in.txt"):
    path = tmp_path / name
    path.write_text(
        f"{len(lines)} {len(lines[0])}\n" + "".join(line + "\n" for line in lines)
    )
    return path


def test_backtracking_solution_saved(tmp_path):
    source = write(tmp_path, CORRIDOR)
    out = tmp_path / "out.txt"
    assert main(["-a", "bt", "-i", str(source), "-o", str(out)]) == 0
    original = Maze.from_file(source)
    solved = Maze.from_file(out)
    assert (solved.rows, solved.cols) == (original.rows, original.cols)
    assert solved.start == original.start
    assert solved.end == original.end
    for r in range(original.rows):
        for c in range(original.cols):
            assert (solved[r, c] == ".") == (original[r, c] == " ")


@pytest.mark.parametrize("name", ["bfs", "dfs", "astar", "unknown"])
def test_other_algorithms_reach_end(tmp_path, name):
    source = write(tmp_path, CORRIDOR)
    out = tmp_path / "out.txt"
    assert main(["--algorithm", name, "--infile", str(source), "--outfile", str(out)]) == 0
    solved = Maze.from_file(out)
    assert solved[4, 4] == "E"
    assert solved[4, 3] == "."
    assert solved[0, 4] == "."


def test_diag_flag(tmp_path):
    source = write(tmp_path, DIAGONAL)
    out = tmp_path / "out.txt"
    main(["-a", "bfs", "-i", str(source), "-o", str(out)])
    assert Maze.from_file(out)[1, 1] == " "
    main(["-a", "bfs", "-i", str(source), "-o", str(out), "--diag"])
    assert Maze.from_file(out)[1, 1] == "."


def test_missing_arguments(tmp_path, capsys):
    assert main(["-a", "bfs"]) == 0
    assert "Both an algorithm and an input file are required" in capsys.readouterr().err


def test_play_without_animation_fails(tmp_path):
    source = write(tmp_path, CORRIDOR)
    with pytest.raises(RuntimeError):
        main(["-a", "play", "-i", str(source)])


def test_speed_sets_draw_delay():
    original_ms = Maze.draw_delay // 1000
    try:
        assert main(["-s", "0"]) == 0
        assert Maze.draw_delay == 0
    finally:
        main(["-s", str(original_ms)])
    assert Maze.draw_delay == original_ms * 1000


def test_parser_options():
    args = build_parser().parse_args(["-a", "astar", "-i", "m.txt", "--diag"])
    assert args.algorithm == "astar"
    assert args.infile == "m.txt"
    assert args.diag is True
    assert args.animate is False
    assert args.outfile is None