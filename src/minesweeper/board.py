"""
Board module for Minesweeper game.

Implements the game board with deferred mine placement, flood reveal,
budgeted flags and game state management.
"""
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from .errors import (
    InvalidDimensionsError,
    InvalidGridError,
    InvalidMinePercentError,
    OutOfBoundsError,
)
from .flags import FlagManager
from .flood import flood_reveal
from .grid import Position, is_in_bounds, iter_neighbors
from .placement import place_mines
from .state import GameState, GameStateMachine
from .tile import Tile, new_visibility_grid
from .truth import UNPLACED, Truth, TruthGrid
from .view import BoardView


# ============================================================================
# Constants
# ============================================================================

MIN_ROWS = 3
MAX_ROWS = 100
MIN_COLS = 3
MAX_COLS = 100
DEFAULT_MINE_PERCENT = 0.15


def _check_dimensions(rows: int, cols: int) -> None:
    if not MIN_ROWS <= rows <= MAX_ROWS:
        raise InvalidDimensionsError(
            f"Number of rows must be between {MIN_ROWS} and {MAX_ROWS} "
            f"(inclusive), was: {rows}"
        )
    if not MIN_COLS <= cols <= MAX_COLS:
        raise InvalidDimensionsError(
            f"Number of columns must be between {MIN_COLS} and {MAX_COLS} "
            f"(inclusive), was: {cols}"
        )


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a randomly generated board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_percent: Fraction of tiles that are mines, in (0, 1).
        easy_start: Open the first uncovered tile onto a zero when possible.
    """

    rows: int = 9
    cols: int = 9
    mine_percent: float = DEFAULT_MINE_PERCENT
    easy_start: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        _check_dimensions(self.rows, self.cols)
        if not 0.0 < self.mine_percent < 1.0:
            raise InvalidMinePercentError(
                "mine_percent must be between 0.0 and 1.0 (exclusive), "
                f"was: {self.mine_percent}"
            )

    @property
    def mine_count(self) -> int:
        """floor(rows * cols * mine_percent), rounding off float noise first."""
        return math.floor(round(self.rows * self.cols * self.mine_percent, 9))

    @property
    def safe_tiles(self) -> int:
        """Number of tiles without a mine."""
        return self.rows * self.cols - self.mine_count


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the truth grid (mines and adjacency counts) and the visibility
    grid (what the player sees). Mines on randomly generated boards are
    placed on the first uncover so the first tile is always safe.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Create a randomly generated board.

        Args:
            config: Board configuration (default: 9x9, 15% mines).
            rng: Random generator used for mine placement.
        """
        config = config or BoardConfig()
        self._init_board(
            rows=config.rows,
            cols=config.cols,
            mine_percent=config.mine_percent,
            mine_count=config.mine_count,
            easy_start=config.easy_start,
            truth=UNPLACED,
            rng=rng,
        )

    def _init_board(
        self,
        rows: int,
        cols: int,
        mine_percent: float,
        mine_count: int,
        easy_start: bool,
        truth: Truth,
        rng: Optional[random.Random],
    ) -> None:
        self._rows = rows
        self._cols = cols
        self._mine_percent = mine_percent
        self._mine_count = mine_count
        self._easy_start = easy_start
        self._truth = truth
        self._rng = rng or random.Random()
        self._tiles = new_visibility_grid(rows, cols)
        self._flags = FlagManager(self._tiles, mine_count)
        self._tiles_remaining = rows * cols - mine_count
        self._state = GameStateMachine()

    # ========================================================================
    # Constructors
    # ========================================================================

    @classmethod
    def new_board(
        cls,
        rows: int,
        cols: int,
        mine_percent: float = DEFAULT_MINE_PERCENT,
        *,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Create a board whose first uncovered tile is never a mine."""
        return cls(BoardConfig(rows, cols, mine_percent), rng=rng)

    @classmethod
    def new_board_easy_start(
        cls,
        rows: int,
        cols: int,
        mine_percent: float = DEFAULT_MINE_PERCENT,
        *,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Create a board with an easy start.

        The first uncovered tile will have zero adjacent mines if at
        least nine tiles are mine-free.
        """
        return cls(BoardConfig(rows, cols, mine_percent, easy_start=True), rng=rng)

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[bool]]) -> "Board":
        """
        Create a board with mines at the given positions.

        Mines are taken as given: there is no first-click safety and no
        easy start.

        Args:
            grid: Rectangular matrix where True marks a mine.

        Raises:
            InvalidGridError: If the grid is empty, ragged, or has an
                unsupported size.
        """
        mines = _grid_to_mask(grid)
        truth = TruthGrid.from_mines(mines)
        rows, cols = truth.shape
        mine_count = truth.mine_count

        board = cls.__new__(cls)
        board._init_board(
            rows=rows,
            cols=cols,
            mine_percent=mine_count / (rows * cols),
            mine_count=mine_count,
            easy_start=False,
            truth=truth,
            rng=None,
        )
        return board

    # ========================================================================
    # Validation (Low-level)
    # ========================================================================

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.is_in_bounds(row, col):
            raise OutOfBoundsError(
                f"row {row} and col {col} is out of bounds for this board "
                f"having {self._rows} rows and {self._cols} columns"
            )

    def _place(self, row: int, col: int) -> TruthGrid:
        """Generate mines with (row, col) as the exclusion anchor."""
        mines = place_mines(
            self._rows,
            self._cols,
            self._mine_count,
            (row, col),
            self._easy_start,
            self._rng,
        )
        self._truth = TruthGrid.from_mines(mines)
        return self._truth

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def uncover(self, row: int, col: int) -> None:
        """
        Uncover the tile at the given position.

        The first uncover starts the game and, on randomly generated
        boards, places the mines. Uncovering a zero tile cascades to its
        neighbors. Uncovering an already uncovered tile does nothing.

        Args:
            row: Row index to uncover.
            col: Column index to uncover.

        Raises:
            InvalidStateError: If the game has ended.
            OutOfBoundsError: If the position is off the board.
        """
        self._state.ensure_not_ended()
        self._check_bounds(row, col)

        if self._state.state == GameState.NOT_STARTED:
            if self._truth is UNPLACED:
                self._place(row, col)
            self._state.start()

        outcome = flood_reveal(self._truth, self._tiles, self._flags, row, col)
        if outcome.exploded is not None:
            self._state.lose(outcome.exploded)
            return

        self._tiles_remaining -= outcome.revealed
        if self._tiles_remaining == 0:
            self._state.win()

    def flag(self, row: int, col: int) -> bool:
        """
        Flag an undecided tile.

        Returns:
            True if the tile was flagged, False if it is not undecided or
            no flags remain.

        Raises:
            InvalidStateError: If the game has ended.
            OutOfBoundsError: If the position is off the board.
        """
        self._state.ensure_not_ended()
        self._check_bounds(row, col)
        # Allowed before placement: flags only touch the visibility grid.
        return self._flags.flag(row, col)

    def unflag(self, row: int, col: int) -> bool:
        """Remove a flag; returns True if the tile was flagged."""
        self._state.ensure_not_ended()
        self._check_bounds(row, col)
        return self._flags.unflag(row, col)

    def toggle_flag(self, row: int, col: int) -> bool:
        """Flag an undecided tile or unflag a flagged one."""
        self._state.ensure_not_ended()
        self._check_bounds(row, col)
        return self._flags.toggle(row, col)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def mine_percent(self) -> float:
        """Fraction of tiles that are mines."""
        return self._mine_percent

    @property
    def mine_count(self) -> int:
        """Total number of mines."""
        return self._mine_count

    @property
    def easy_start(self) -> bool:
        """Check if the first uncover opens onto a zero when possible."""
        return self._easy_start

    @property
    def flags_remaining(self) -> int:
        """Flags still available to place."""
        return self._flags.remaining

    @property
    def tiles_remaining(self) -> int:
        """Safe tiles not yet revealed."""
        return self._tiles_remaining

    @property
    def is_placed(self) -> bool:
        """Check if mines have been placed."""
        return self._truth is not UNPLACED

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._state.state

    @property
    def is_ended(self) -> bool:
        """Check if the game has been won or lost."""
        return self._state.is_ended

    @property
    def is_ended_with_win(self) -> bool:
        """Check if game was won."""
        return self._state.is_won

    @property
    def is_ended_with_loss(self) -> bool:
        """Check if game was lost."""
        return self._state.is_lost

    @property
    def exploded_tile(self) -> Position:
        """
        Position of the mine that ended the game.

        Raises:
            InvalidStateError: If the game has not ended with a loss.
        """
        return self._state.exploded_tile

    def is_in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return is_in_bounds(self._rows, self._cols, row, col)

    def tile(self, row: int, col: int) -> Tile:
        """Get the visible tile at a position."""
        self._check_bounds(row, col)
        return self._tiles[row][col]

    def is_uncovered(self, row: int, col: int) -> bool:
        """Check if tile is revealed or exploded."""
        return self.tile(row, col).is_uncovered

    def is_flagged(self, row: int, col: int) -> bool:
        """Check if tile is flagged."""
        return self.tile(row, col).is_flagged

    def is_undecided(self, row: int, col: int) -> bool:
        """Check if tile is undecided."""
        return self.tile(row, col).is_undecided

    def is_exploded(self, row: int, col: int) -> bool:
        """Check if tile is an exploded mine."""
        return self.tile(row, col).is_exploded

    def displayed_number(self, row: int, col: int) -> int:
        """Adjacent mine count of a revealed tile, otherwise NOT_REVEALED."""
        return self.tile(row, col).displayed_number

    def count_adjacent_flagged(self, row: int, col: int) -> int:
        """Count flagged tiles around a position."""
        self._check_bounds(row, col)
        return sum(
            1
            for neighbor_row, neighbor_col in iter_neighbors(
                self._rows, self._cols, row, col
            )
            if self._tiles[neighbor_row][neighbor_col].is_flagged
        )

    def count_adjacent_uncovered(self, row: int, col: int) -> int:
        """Count uncovered tiles around a position."""
        self._check_bounds(row, col)
        return sum(
            1
            for neighbor_row, neighbor_col in iter_neighbors(
                self._rows, self._cols, row, col
            )
            if self._tiles[neighbor_row][neighbor_col].is_uncovered
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = undecided
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = exploded mine
        """
        obs = np.zeros((self._rows, self._cols), dtype=np.int8)
        for row in range(self._rows):
            for col in range(self._cols):
                obs[row, col] = self._tiles[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of tiles that can still be uncovered or flagged.

        Returns:
            List of (row, col) positions of undecided tiles.
        """
        actions = []
        for row in range(self._rows):
            for col in range(self._cols):
                if self._tiles[row][col].is_undecided:
                    actions.append((row, col))
        return actions

    def render(self) -> str:
        """Render board as ASCII string, one line per row."""
        return "\n".join(
            " ".join(tile.to_char() for tile in tiles) for tiles in self._tiles
        )

    def view(self) -> BoardView:
        """Get a read-only view of this board."""
        return BoardView(self)

    def __repr__(self) -> str:
        """Summary in the form Board(rows=.., columns=.., mine_percent=..)."""
        return (
            f"Board(rows={self._rows}, columns={self._cols}, "
            f"mine_percent={self._mine_percent:.3f})"
        )


def _grid_to_mask(grid: Sequence[Sequence[bool]]) -> np.ndarray:
    """Validate an explicit mine grid and convert it to a bool mask."""
    if grid is None:
        raise InvalidGridError("grid must not be None")
    matrix = [list(line) for line in grid]
    if not matrix:
        raise InvalidGridError("grid must have at least one row")

    rows = len(matrix)
    if not MIN_ROWS <= rows <= MAX_ROWS:
        raise InvalidGridError(
            f"grid must have between {MIN_ROWS} and {MAX_ROWS} rows "
            f"(inclusive), was: {rows}"
        )
    cols = len(matrix[0])
    for index, line in enumerate(matrix[1:], start=1):
        if len(line) != cols:
            raise InvalidGridError(
                f"The length of each row must be the same. Row 0 was {cols} "
                f"while row {index} was {len(line)}"
            )
    if not MIN_COLS <= cols <= MAX_COLS:
        raise InvalidGridError(
            f"grid rows must have between {MIN_COLS} and {MAX_COLS} columns "
            f"(inclusive), was: {cols}"
        )
    return np.array(matrix, dtype=bool)
