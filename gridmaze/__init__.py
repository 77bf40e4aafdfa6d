"""Procedural grid mazes and shortest paths to their exit."""
from .errors import InvalidDimensions, MazeError, NoExitDefined, OutOfBounds, PlayerNotFound
from .game import MazeGame
from .maze_generator import flood_fill, generate
from .maze_map import EAST, NORTH, SOUTH, WEST, Cell, MazeMap, Player
from .planner import find_path, path_cells, solve

__version__ = "0.1.0"
