"""
A* shortest path from a cell to the maze exit.

Steps cost 1 and the heuristic is the Manhattan distance, which never
overestimates in a 4-connected grid where walls only remove edges. Ties on
f = g + h go to the smaller h, then to the entry pushed first, so the same grid
and start always give the same path.
"""
import heapq
import itertools
import logging

import numpy as np

from . import config
from .errors import NoExitDefined, OutOfBounds

logger = logging.getLogger(__name__)


def heuristic(a, b):
    """Manhattan distance heuristic for A*"""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(maze_map, column, row):
    """
    Cells from (column, row) to the exit as a list of (column, row), start first.
    Returns [] when the exit cannot be reached.
    """
    if not maze_map.in_bounds(column, row):
        raise OutOfBounds(column, row, maze_map.width, maze_map.height, what="Start")
    goal = maze_map.exit_position()
    if goal is None:
        raise NoExitDefined("Grid has no exit cell")

    start = (column, row)
    counter = itertools.count()
    h = heuristic(start, goal)
    open_set = [(h, h, next(counter), start)]
    came_from = {start: None}
    g_score = {start: 0}
    closed = set()
    expanded = 0

    while open_set:
        f, h, _order, current = heapq.heappop(open_set)
        if current in closed or f - h > g_score[current]:
            continue  # stale entry
        closed.add(current)
        expanded += 1

        if current == goal:
            path = []
            while current is not None:
                path.append(current)
                current = came_from[current]
            path.reverse()
            logger.debug(
                "A* reached exit %s from %s in %d steps, %d cells expanded",
                goal, start, len(path) - 1, expanded,
            )
            return path

        tentative_g_score = g_score[current] + 1
        for nc, nr, _d in maze_map.neighbours_open(*current):
            neighbor = (nc, nr)
            if neighbor not in g_score or tentative_g_score < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g_score
                nh = heuristic(neighbor, goal)
                heapq.heappush(
                    open_set, (tentative_g_score + nh, nh, next(counter), neighbor)
                )

    logger.debug("A* found no path from %s to exit %s", start, goal)
    return []


def solve(maze_map, column, row):
    """
    PathResult for the shortest route from (column, row) to the exit: an int
    array of shape (height, width), indexed [row, column], holding each path
    cell's step number (0 at the start) and config.NO_PATH everywhere else.
    An unreachable exit gives an array filled with NO_PATH.
    """
    result = np.full((maze_map.height, maze_map.width), config.NO_PATH, dtype=int)
    for step, (c, r) in enumerate(find_path(maze_map, column, row)):
        result[r, c] = step
    return result


def path_cells(result):
    """Decode a PathResult back into its ordered list of (column, row)."""
    rows, columns = np.nonzero(result != config.NO_PATH)
    order = np.argsort(result[rows, columns], kind="stable")
    return [(int(columns[i]), int(rows[i])) for i in order]
