import logging

from . import config
from .errors import PlayerNotFound
from .maze_generator import generate
from .maze_map import OFFSETS, Player
from .planner import solve

logger = logging.getLogger(__name__)


class MazeGame:
    """
    Game state around the current maze: who is playing, where the players are,
    and who reached the exit. Drawing and key handling live elsewhere; they call
    move_player / solution / new_maze and read self.grid.
    """

    def __init__(self, width=config.DEFAULT_WIDTH, height=config.DEFAULT_HEIGHT,
                 seed=None, algorithm=config.DEFAULT_ALGORITHM):
        self.width = width
        self.height = height
        self.algorithm = algorithm
        # by default you are the first player but this can change
        self.player = Player.PLAYER1
        self.wins = []
        self.grid = None
        self.new_maze(seed)

    def new_maze(self, seed=None):
        """Replace the current maze with a freshly generated one of the same size."""
        self.grid = generate(self.width, self.height, seed=seed, algorithm=self.algorithm)
        return self.grid

    def find_player(self, player=None):
        player = self.player if player is None else player
        position = self.grid.find_player(player)
        if position is None:
            raise PlayerNotFound(f"{player.name} is not in the maze")
        return position

    def check_winner(self):
        """First player (by number) standing on the exit, or None."""
        exit_position = self.grid.exit_position()
        if exit_position is None:
            return None
        occupants = self.grid.get_cell(*exit_position).occupants
        for player in Player:
            if player in occupants:
                return player
        return None

    def move_player(self, direction):
        """
        Move the active player one cell towards direction if no wall is in the way.
        Returns True if the player moved. Reaching the exit records the win for the
        active player and starts a new maze.
        """
        column, row = self.find_player()
        cell = self.grid.get_cell(column, row)
        if cell.has_wall(direction):
            return False

        dc, dr, _facing = OFFSETS[direction]
        self.grid.place_player(self.player, column + dc, row + dr)

        exit_position = self.grid.exit_position()
        if exit_position is not None and self.player in self.grid.get_cell(*exit_position).occupants:
            logger.info("%s reached the exit at %s", self.player.name, exit_position)
            self.wins.append(self.player)
            self.new_maze()
        return True

    def solution(self):
        """PathResult from the active player's cell to the exit."""
        return solve(self.grid, *self.find_player())
