class MazeError(Exception):
    """Base class for every error raised by gridmaze."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, width, height):
        super().__init__(f"Maze dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height


class OutOfBounds(MazeError, IndexError):
    def __init__(self, column, row, width, height, what="Cell"):
        super().__init__(
            f"{what} ({column}, {row}) is outside the {width}x{height} grid"
        )
        self.column = column
        self.row = row
        self.width = width
        self.height = height


class NoExitDefined(MazeError, LookupError):
    """The grid has no cell flagged as exit."""


class PlayerNotFound(MazeError, LookupError):
    pass
