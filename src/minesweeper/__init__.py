"""
Minesweeper game module.

Provides the board core: mine placement, flood reveal, flags and game
state, plus a read-only view and a Gymnasium environment.
"""
from .board import (
    Board,
    BoardConfig,
    DEFAULT_MINE_PERCENT,
    MAX_COLS,
    MAX_ROWS,
    MIN_COLS,
    MIN_ROWS,
)
from .environment import MinesweeperEnv
from .errors import (
    InvalidDimensionsError,
    InvalidGridError,
    InvalidMinePercentError,
    InvalidStateError,
    MinesweeperError,
    OutOfBoundsError,
)
from .state import GameState
from .tile import NOT_REVEALED, Tile, TileState
from .view import BoardView

__all__ = [
    "Board",
    "BoardConfig",
    "BoardView",
    "GameState",
    "Tile",
    "TileState",
    "NOT_REVEALED",
    "DEFAULT_MINE_PERCENT",
    "MIN_ROWS",
    "MAX_ROWS",
    "MIN_COLS",
    "MAX_COLS",
    "MinesweeperEnv",
    "MinesweeperError",
    "InvalidDimensionsError",
    "InvalidMinePercentError",
    "InvalidGridError",
    "OutOfBoundsError",
    "InvalidStateError",
]
