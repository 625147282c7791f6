import pytest

from routemaze.maze.maze import Maze
from routemaze.maze.player import Direction, Player


@pytest.fixture
def maze(tmp_path):
    path = tmp_path / "maze.txt"
    path.write_text("3 3\nS  \n # \n  E\n", encoding="utf-8")
    return Maze.from_file(path)


def test_blocked_by_edge(maze):
    player = Player(0, 0)
    assert player.move(maze, Direction.LEFT) is False
    assert (player.row, player.col) == (0, 0)
    assert maze[0, 0] == "S"


def test_blocked_by_wall(maze):
    maze[1, 0] = "#"
    player = Player(0, 0)
    assert player.move(maze, Direction.DOWN) is False
    assert (player.row, player.col) == (0, 0)


def test_move_leaves_trail(maze):
    player = Player(0, 0)
    assert player.move(maze, Direction.RIGHT) is False
    assert (player.row, player.col) == (0, 2)
    assert maze[0, 0] == "."
    assert maze[0, 1] == "."
    assert maze[0, 2] == "S"


def test_reaching_end_returns_true(maze):
    player = Player(0, 0)
    player.move(maze, Direction.RIGHT)
    assert player.move(maze, Direction.DOWN) is True
    assert maze[0, 2] == "."
    assert maze[1, 2] == "."
    assert maze[2, 2] == "E"
    assert (player.row, player.col) == (0, 2)


def test_backtracking_erases_trail(maze):
    player = Player(0, 0)
    player.move(maze, Direction.RIGHT)
    assert player.move(maze, Direction.LEFT) is False
    assert (player.row, player.col) == (0, 0)
    assert maze[0, 0] == "S"
    assert maze[0, 1] == " "
    assert maze[0, 2] == " "