"""
Perfect maze generation.

Both carvers grow a random spanning tree over the cell graph, so every maze has
exactly width * height - 1 openings and a unique simple path between any two
cells. All randomness comes from one random.Random owned by the call, which makes
generate(w, h, seed) reproducible.
"""
import logging
import random
from collections import deque

import numpy as np

from . import config
from .errors import OutOfBounds
from .maze_map import MazeMap, Player

logger = logging.getLogger(__name__)


def generate(width, height, seed=None, algorithm=config.DEFAULT_ALGORITHM):
    """
    Build a new maze. PLAYER1 starts on config.START_CELL and the exit is the
    cell farthest from it (lowest index wins a tie).
    Raises InvalidDimensions for non-positive sizes.
    """
    try:
        carve = CARVERS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm {algorithm!r}, expected one of {config.ALGORITHMS}"
        ) from None

    maze_map = MazeMap(width, height)
    rng = random.Random(seed)
    start = config.START_CELL

    carve(maze_map, start, rng)

    distances = flood_fill(maze_map, *start)
    # argmax returns the first maximum in row-major order
    exit_row, exit_column = np.unravel_index(np.argmax(distances), distances.shape)
    maze_map.set_exit(int(exit_column), int(exit_row))
    maze_map.place_player(Player.PLAYER1, *start)

    logger.debug(
        "Generated %dx%d maze (seed=%r, algorithm=%s), exit at %s, %d steps from start",
        width, height, seed, algorithm, maze_map.exit_position(), distances.max(),
    )
    return maze_map


def carve_prim(maze_map, start, rng):
    """Randomized frontier expansion: open a uniformly chosen frontier edge each step."""
    in_tree = {start}
    frontier = [(start, (nc, nr)) for nc, nr, _d in maze_map.neighbours(*start)]

    while frontier:
        # swap-remove
        i = rng.randrange(len(frontier))
        frontier[i], frontier[-1] = frontier[-1], frontier[i]
        cell, next_cell = frontier.pop()
        if next_cell in in_tree:
            continue

        maze_map.remove_wall_between(cell, next_cell)
        in_tree.add(next_cell)
        for nc, nr, _d in maze_map.neighbours(*next_cell):
            if (nc, nr) not in in_tree:
                frontier.append((next_cell, (nc, nr)))


def carve_backtracker(maze_map, start, rng):
    """Randomized depth-first search with an explicit stack."""
    stack = [start]
    visited = {start}

    while stack:
        x, y = stack[-1]
        unvisited_neighbors = [
            (nx, ny) for nx, ny, _d in maze_map.neighbours(x, y) if (nx, ny) not in visited
        ]

        if len(unvisited_neighbors) > 0:
            next_cell = rng.choice(unvisited_neighbors)
            maze_map.remove_wall_between((x, y), next_cell)
            visited.add(next_cell)
            stack.append(next_cell)
        else:
            stack.pop()


CARVERS = {
    "prim": carve_prim,
    "backtracker": carve_backtracker,
}


def flood_fill(maze_map, column, row):
    """Breadth-first step counts from (column, row) through open walls, -1 where unreachable."""
    costs = np.full((maze_map.height, maze_map.width), -1, dtype=int)
    if not maze_map.in_bounds(column, row):
        raise OutOfBounds(column, row, maze_map.width, maze_map.height, what="Start")
    costs[row, column] = 0

    q = deque([(column, row)])
    while q:
        c, r = q.popleft()
        base_cost = costs[r, c]
        for nc, nr, _d in maze_map.neighbours_open(c, r):
            if costs[nr, nc] == -1:
                costs[nr, nc] = base_cost + 1
                q.append((nc, nr))
    return costs
