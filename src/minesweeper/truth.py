"""
Truth grid: where the mines are and how many touch each cell.

A board's truth is either UNPLACED (mines not generated yet) or a
TruthGrid built once from a mine mask.
"""
from typing import Tuple, Union

import numpy as np


class Unplaced:
    """Marker for a board whose mines have not been generated."""

    _instance = None

    def __new__(cls) -> "Unplaced":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNPLACED"


UNPLACED = Unplaced()


def count_adjacent_mines(mines: np.ndarray) -> np.ndarray:
    """
    Count mines around every cell with a padded 3x3 sum.

    Args:
        mines: 2D bool mine mask.

    Returns:
        int8 array of neighbor counts (the cell itself excluded).
    """
    height, width = mines.shape
    padded = np.pad(mines.astype(np.int8), 1, mode="constant", constant_values=0)
    total = np.zeros((height, width), dtype=np.int8)
    for delta_row in range(3):
        for delta_col in range(3):
            total += padded[delta_row:delta_row + height, delta_col:delta_col + width]
    return total - mines.astype(np.int8)


class TruthGrid:
    """Immutable mine layout with precomputed adjacency counts."""

    def __init__(self, mines: np.ndarray, counts: np.ndarray) -> None:
        self._mines = mines
        self._counts = counts
        self._mines.setflags(write=False)
        self._counts.setflags(write=False)

    @classmethod
    def from_mines(cls, mines: np.ndarray) -> "TruthGrid":
        """Build a truth grid from a 2D boolean mine mask."""
        mask = np.array(mines, dtype=bool)
        if mask.ndim != 2:
            raise ValueError(f"Mine mask must be 2D, got shape {mask.shape}")
        return cls(mask, count_adjacent_mines(mask))

    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, cols) of the grid."""
        return self._mines.shape

    @property
    def mine_count(self) -> int:
        """Total number of mines."""
        return int(self._mines.sum())

    @property
    def mines(self) -> np.ndarray:
        """Read-only mine mask."""
        return self._mines

    def is_mine(self, row: int, col: int) -> bool:
        """Check if a mine sits at (row, col)."""
        return bool(self._mines[row, col])

    def count(self, row: int, col: int) -> int:
        """Adjacent mine count at (row, col)."""
        return int(self._counts[row, col])


Truth = Union[Unplaced, TruthGrid]
