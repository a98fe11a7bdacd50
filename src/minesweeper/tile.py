"""
Tile module for Minesweeper game.

Represents the player-facing state of a single board position:
undecided, flagged, revealed with an adjacency count, or exploded.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional


# ============================================================================
# Constants
# ============================================================================

NOT_REVEALED = -1


class TileState(Enum):
    """Possible visual states of a tile."""

    UNDECIDED = auto()
    FLAGGED = auto()
    REVEALED = auto()
    EXPLODED = auto()


# ============================================================================
# Tile Value
# ============================================================================

@dataclass(frozen=True)
class Tile:
    """
    Visible state of one board position.

    Attributes:
        state: Current visual state.
        count: Adjacent mine count (0-8), set only when revealed.
    """

    state: TileState = TileState.UNDECIDED
    count: Optional[int] = None

    def __post_init__(self) -> None:
        """Keep the count consistent with the state."""
        if self.state == TileState.REVEALED:
            if self.count is None or not 0 <= self.count <= 8:
                raise ValueError(
                    f"Revealed tile needs a count in 0-8, got {self.count}"
                )
        elif self.count is not None:
            raise ValueError(f"Only revealed tiles carry a count ({self.state.name})")

    @classmethod
    def revealed(cls, count: int) -> "Tile":
        """Create a revealed tile showing the given count."""
        return cls(TileState.REVEALED, count)

    @property
    def is_undecided(self) -> bool:
        """Check if tile is undecided."""
        return self.state == TileState.UNDECIDED

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.state == TileState.FLAGGED

    @property
    def is_revealed(self) -> bool:
        """Check if tile is revealed as safe."""
        return self.state == TileState.REVEALED

    @property
    def is_exploded(self) -> bool:
        """Check if tile is an exploded mine."""
        return self.state == TileState.EXPLODED

    @property
    def is_uncovered(self) -> bool:
        """Revealed and exploded tiles both count as uncovered."""
        return self.state in (TileState.REVEALED, TileState.EXPLODED)

    @property
    def displayed_number(self) -> int:
        """Adjacency count if revealed, otherwise NOT_REVEALED."""
        if self.count is None:
            return NOT_REVEALED
        return self.count

    def to_observation(self) -> int:
        """
        Convert tile to an observation value for renderers and agents.

        Returns:
            -1: Undecided tile
            -2: Flagged tile
            0-8: Revealed tile with adjacent mine count
            9: Exploded mine
        """
        if self.state == TileState.UNDECIDED:
            return -1
        if self.state == TileState.FLAGGED:
            return -2
        if self.state == TileState.EXPLODED:
            return 9
        return self.count

    def to_char(self) -> str:
        """Single character used by the ASCII renderer."""
        if self.state == TileState.UNDECIDED:
            return "."
        if self.state == TileState.FLAGGED:
            return "F"
        if self.state == TileState.EXPLODED:
            return "*"
        if self.count == 0:
            return " "
        return str(self.count)


UNDECIDED = Tile(TileState.UNDECIDED)
FLAGGED = Tile(TileState.FLAGGED)
EXPLODED = Tile(TileState.EXPLODED)


# ============================================================================
# Visibility Grid
# ============================================================================

VisibilityGrid = List[List[Tile]]


def new_visibility_grid(rows: int, cols: int) -> VisibilityGrid:
    """Create a rows x cols grid of undecided tiles."""
    return [[UNDECIDED for _ in range(cols)] for _ in range(rows)]
