import argparse
import logging
import sys

import numpy as np

from . import config
from .errors import MazeError
from .maze_generator import generate
from .maze_map import Player
from .planner import solve


def build_parser():
    parser = argparse.ArgumentParser(prog="gridmaze", description="Generate a maze and solve it")
    parser.add_argument("--width", type=int, default=config.DEFAULT_WIDTH, help="Number of columns")
    parser.add_argument("--height", type=int, default=config.DEFAULT_HEIGHT, help="Number of rows")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible maze")
    parser.add_argument("--algorithm", choices=config.ALGORITHMS, default=config.DEFAULT_ALGORITHM)
    parser.add_argument("--start", type=int, nargs=2, metavar=("COLUMN", "ROW"),
                        help="Solve from this cell instead of player 1's")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=config.LOG_FORMAT)

    try:
        maze_map = generate(args.width, args.height, seed=args.seed, algorithm=args.algorithm)
        start = tuple(args.start) if args.start else maze_map.find_player(Player.PLAYER1)
        result = solve(maze_map, *start)
    except MazeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"Maze {maze_map.width}x{maze_map.height}, start {start}, exit {maze_map.exit_position()}")
    steps = int(result.max())
    if steps == config.NO_PATH:
        print("No path to the exit")
    else:
        print(f"Path length: {steps} steps")
    with np.printoptions(linewidth=200):
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
