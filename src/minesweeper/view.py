"""
Read-only view of a board.

Renderers and agents get a BoardView so they can inspect the game
without being able to change it.
"""
from typing import TYPE_CHECKING, List

import numpy as np

from .grid import Position
from .state import GameState
from .tile import Tile

if TYPE_CHECKING:
    from .board import Board


class BoardView:
    """Query-only wrapper around a Board."""

    def __init__(self, board: "Board") -> None:
        self._board = board

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._board.rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._board.columns

    @property
    def mine_percent(self) -> float:
        """Fraction of tiles that are mines."""
        return self._board.mine_percent

    @property
    def mine_count(self) -> int:
        """Total number of mines."""
        return self._board.mine_count

    @property
    def flags_remaining(self) -> int:
        """Flags still available to place."""
        return self._board.flags_remaining

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._board.game_state

    @property
    def is_ended(self) -> bool:
        """Check if the game has been won or lost."""
        return self._board.is_ended

    @property
    def is_ended_with_win(self) -> bool:
        """Check if game was won."""
        return self._board.is_ended_with_win

    @property
    def is_ended_with_loss(self) -> bool:
        """Check if game was lost."""
        return self._board.is_ended_with_loss

    @property
    def exploded_tile(self) -> Position:
        """Position of the mine that ended the game."""
        return self._board.exploded_tile

    def is_in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return self._board.is_in_bounds(row, col)

    def tile(self, row: int, col: int) -> Tile:
        """Get the visible tile at a position."""
        return self._board.tile(row, col)

    def is_uncovered(self, row: int, col: int) -> bool:
        """Check if tile is revealed or exploded."""
        return self._board.is_uncovered(row, col)

    def is_flagged(self, row: int, col: int) -> bool:
        """Check if tile is flagged."""
        return self._board.is_flagged(row, col)

    def is_undecided(self, row: int, col: int) -> bool:
        """Check if tile is undecided."""
        return self._board.is_undecided(row, col)

    def is_exploded(self, row: int, col: int) -> bool:
        """Check if tile is an exploded mine."""
        return self._board.is_exploded(row, col)

    def displayed_number(self, row: int, col: int) -> int:
        """Adjacent mine count of a revealed tile, otherwise NOT_REVEALED."""
        return self._board.displayed_number(row, col)

    def count_adjacent_flagged(self, row: int, col: int) -> int:
        """Count flagged tiles around a position."""
        return self._board.count_adjacent_flagged(row, col)

    def count_adjacent_uncovered(self, row: int, col: int) -> int:
        """Count uncovered tiles around a position."""
        return self._board.count_adjacent_uncovered(row, col)

    def get_observation(self) -> np.ndarray:
        """Get board state as an int8 numpy array."""
        return self._board.get_observation()

    def get_valid_actions(self) -> List[Position]:
        """Get positions of undecided tiles."""
        return self._board.get_valid_actions()

    def render(self) -> str:
        """Render board as ASCII string."""
        return self._board.render()

    def __repr__(self) -> str:
        return f"BoardView({self._board!r})"
