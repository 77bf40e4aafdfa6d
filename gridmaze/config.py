# ==================== CONFIGURATION ====================
DEFAULT_WIDTH = 15
DEFAULT_HEIGHT = 15

# "prim" grows the tree from a random frontier edge, "backtracker" is the DFS carver
ALGORITHMS = ("prim", "backtracker")
DEFAULT_ALGORITHM = "prim"

START_CELL = (0, 0)  # (column, row), gets PLAYER1 on a new maze
NO_PATH = -1  # PathResult value for cells off the path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# =======================================================
