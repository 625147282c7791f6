"""Command line for solving a maze read from a file."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .maze import Maze
from .solver import SolveAlgorithm, Solver

_ALGORITHMS = {
    "bt": SolveAlgorithm.BACKTRACKING,
    "bfs": SolveAlgorithm.BFS,
    "dfs": SolveAlgorithm.DFS,
    "astar": SolveAlgorithm.ASTAR,
    "play": SolveAlgorithm.PLAY,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a maze read from a file.")
    parser.add_argument("-a", "--algorithm", help="bt, bfs, dfs, astar or play")
    parser.add_argument("-i", "--infile", help="maze file to read")
    parser.add_argument("-o", "--outfile", help="file to save the solved maze to")
    parser.add_argument("--animate", action="store_true", help="draw while solving")
    parser.add_argument("-s", "--speed", type=int, help="milliseconds between frames")
    parser.add_argument("--diag", action="store_true", help="allow diagonal moves")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.speed is not None:
        Maze.draw_delay = 1000 * args.speed

    if not args.algorithm or not args.infile:
        print("Both an algorithm and an input file are required", file=sys.stderr)
        return 0

    maze = Maze.from_file(args.infile, args.animate)
    algorithm = _ALGORITHMS.get(args.algorithm, SolveAlgorithm.BACKTRACKING)
    Solver(args.diag).solve(maze, algorithm, args.animate)
    if args.outfile:
        maze.save(args.outfile)
    return 0


if __name__ == "__main__":
    sys.exit(main())