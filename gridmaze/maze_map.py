import copy
from dataclasses import dataclass, field
from enum import IntEnum

from .errors import InvalidDimensions, OutOfBounds

# Direction constants
NORTH, EAST, SOUTH, WEST = 0, 1, 2, 3

# direction -> (column offset, row offset, facing direction); rows grow southwards
OFFSETS = {
    NORTH: (0, -1, SOUTH),
    EAST: (1, 0, WEST),
    SOUTH: (0, 1, NORTH),
    WEST: (-1, 0, EAST),
}


class Player(IntEnum):
    PLAYER1 = 1
    PLAYER2 = 2


@dataclass
class Cell:
    # every side starts as a wall (True), carving flips it to False
    wallN: bool = True
    wallE: bool = True
    wallS: bool = True
    wallW: bool = True
    is_exit: bool = False
    occupants: set = field(default_factory=set)

    def has_wall(self, direction: int) -> bool:
        return (self.wallN, self.wallE, self.wallS, self.wallW)[direction]

    def _set_wall(self, direction: int, exists: bool):
        if direction == NORTH:
            self.wallN = exists
        elif direction == EAST:
            self.wallE = exists
        elif direction == SOUTH:
            self.wallS = exists
        elif direction == WEST:
            self.wallW = exists
        else:
            raise ValueError(f"Unknown direction {direction!r}")


class MazeMap:
    """
    Rectangular grid of cells stored as a flat list, addressed by
    row * width + column. Neighbours are computed from the index, never stored.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise InvalidDimensions(width, height)
        self.width = width
        self.height = height
        self.cells = [Cell() for _ in range(width * height)]

    def in_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self.width and 0 <= row < self.height

    def index(self, column: int, row: int) -> int:
        return row * self.width + column

    def position(self, index: int):
        return index % self.width, index // self.width

    def get_cell(self, column: int, row: int) -> Cell:
        if not self.in_bounds(column, row):
            raise OutOfBounds(column, row, self.width, self.height)
        return self.cells[self.index(column, row)]

    def set_wall(self, column: int, row: int, direction: int, exists: bool):
        """
        Set wall in this cell and matching wall in neighbour.
        exists=True  -> there is a wall
        exists=False -> opening (corridor)
        Walls on the border of the grid can never be opened.
        """
        cell = self.get_cell(column, row)
        dc, dr, facing = OFFSETS[direction]
        nc, nr = column + dc, row + dr

        if not self.in_bounds(nc, nr):
            if not exists:
                raise OutOfBounds(nc, nr, self.width, self.height, what="Opening towards")
            return

        cell._set_wall(direction, exists)
        self.cells[self.index(nc, nr)]._set_wall(facing, exists)

    def remove_wall_between(self, a, b):
        """Open the wall between two orthogonally adjacent cells given as (column, row)."""
        (c1, r1), (c2, r2) = a, b
        for direction, (dc, dr, _facing) in OFFSETS.items():
            if (c1 + dc, r1 + dr) == (c2, r2):
                self.set_wall(c1, r1, direction, False)
                return
        raise ValueError(f"Cells {a} and {b} are not adjacent")

    def neighbours(self, column: int, row: int):
        """Returns list of (nc, nr, direction) for in-bound neighbours, walls ignored."""
        result = []
        for direction, (dc, dr, _facing) in OFFSETS.items():
            nc, nr = column + dc, row + dr
            if self.in_bounds(nc, nr):
                result.append((nc, nr, direction))
        return result

    def neighbours_open(self, column: int, row: int):
        """Returns list of (nc, nr, direction) where no wall between (column,row) & neighbour."""
        cell = self.get_cell(column, row)
        return [
            (nc, nr, direction)
            for nc, nr, direction in self.neighbours(column, row)
            if not cell.has_wall(direction)
        ]

    def open_wall_count(self) -> int:
        # only east and south walls, so each interior pair is counted once
        count = 0
        for i, cell in enumerate(self.cells):
            column, row = self.position(i)
            if column + 1 < self.width and not cell.wallE:
                count += 1
            if row + 1 < self.height and not cell.wallS:
                count += 1
        return count

    def set_exit(self, column: int, row: int):
        target = self.get_cell(column, row)
        for cell in self.cells:
            cell.is_exit = False
        target.is_exit = True

    def exit_position(self):
        for i, cell in enumerate(self.cells):
            if cell.is_exit:
                return self.position(i)
        return None

    def place_player(self, player: Player, column: int, row: int):
        target = self.get_cell(column, row)
        self.remove_player(player)
        target.occupants.add(player)

    def remove_player(self, player: Player):
        for cell in self.cells:
            cell.occupants.discard(player)

    def find_player(self, player: Player):
        for i, cell in enumerate(self.cells):
            if player in cell.occupants:
                return self.position(i)
        return None

    def copy(self):
        return copy.deepcopy(self)

    def __repr__(self):
        return f"MazeMap(width={self.width}, height={self.height}, exit={self.exit_position()})"
