import random
from collections import deque

import pytest

from routemaze.maze.generator import GenerateAlgorithm, Generator


def _grid(maze):
    return maze.render().splitlines()[1:]


def _reachable(grid, rows, cols):
    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        r, c = queue.popleft()
        for dr, dc in ((-1, 0), (1, 0), (0, 1), (0, -1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and grid[nr][nc] != "#" and (nr, nc) not in seen:
                seen.add((nr, nc))
                queue.append((nr, nc))
    return seen


@pytest.mark.parametrize("algorithm", list(GenerateAlgorithm))
@pytest.mark.parametrize("rows, cols, seed", [(7, 9, 1), (11, 5, 2), (1, 9, 3), (9, 1, 4), (1, 1, 5)])
def test_generated_maze_is_a_perfect_maze(algorithm, rows, cols, seed):
    maze = Generator(rows, cols, random.Random(seed)).generate(algorithm, animate=False)
    grid = _grid(maze)
    assert (maze.rows, maze.cols) == (rows, cols)
    assert len(grid) == rows and all(len(line) == cols for line in grid)
    assert grid[0][0] == "S" or (rows, cols) == (1, 1)
    assert grid[rows - 1][cols - 1] == "E"
    assert set("".join(grid)) <= {"S", "E", "#", " "}

    for r in range(rows):
        for c in range(cols):
            if r % 2 == 0 and c % 2 == 0:
                assert grid[r][c] != "#"
            if r % 2 == 1 and c % 2 == 1:
                assert grid[r][c] == "#"

    rooms = ((rows + 1) // 2) * ((cols + 1) // 2)
    open_cells = {(r, c) for r in range(rows) for c in range(cols) if grid[r][c] != "#"}
    assert len(open_cells) == 2 * rooms - 1
    assert _reachable(grid, rows, cols) == open_cells


def test_even_dimensions_are_made_odd():
    assert (Generator(8, 10).rows, Generator(8, 10).cols) == (Generator(7, 9).rows, Generator(7, 9).cols)


@pytest.mark.parametrize("algorithm", list(GenerateAlgorithm))
def test_same_seed_gives_same_maze(algorithm):
    first = Generator(9, 9, random.Random(42)).generate(algorithm, animate=False)
    second = Generator(9, 9, random.Random(42)).generate(algorithm, animate=False)
    assert first.render() == second.render()


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError):
        Generator(5, 5).generate("bogus", animate=False)


def test_empty_dimensions_raise():
    with pytest.raises(ValueError):
        Generator(0, 5).generate(GenerateAlgorithm.DFS, animate=False)