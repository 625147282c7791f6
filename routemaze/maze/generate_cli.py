"""Command line for generating a maze and optionally saving it."""

from __future__ import annotations

import argparse
import shutil
import sys
from typing import Sequence

from .generator import GenerateAlgorithm, Generator
from .maze import Maze

_ALGORITHMS = {
    "dfs": GenerateAlgorithm.DFS,
    "prims": GenerateAlgorithm.PRIMS,
    "kruskals": GenerateAlgorithm.KRUSKALS,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a random maze.")
    parser.add_argument("-r", "--rows", type=int, default=-1, help="number of rows")
    parser.add_argument("-c", "--cols", type=int, default=-1, help="number of columns")
    parser.add_argument("-a", "--algorithm", help="dfs, prims or kruskals")
    parser.add_argument("--animate", action="store_true", help="draw while generating")
    parser.add_argument("-f", "--file", help="file to save the maze to")
    parser.add_argument("-s", "--speed", type=int, help="milliseconds between frames")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.speed is not None:
        Maze.draw_delay = 1000 * args.speed

    if not args.algorithm:
        print("Must specify an algorithm (prims)", file=sys.stderr)
        return 0

    rows, cols = args.rows, args.cols
    if rows < 0 or cols < 0:
        size = shutil.get_terminal_size()
        # Leave a border between the screen edge and the maze walls.
        rows = size.lines - 2 if rows < 0 else rows
        cols = size.columns - 2 if cols < 0 else cols

    algorithm = _ALGORITHMS.get(args.algorithm, GenerateAlgorithm.DFS)
    maze = Generator(rows, cols).generate(algorithm, args.animate)
    if args.file:
        maze.save(args.file)
    return 0


if __name__ == "__main__":
    sys.exit(main())