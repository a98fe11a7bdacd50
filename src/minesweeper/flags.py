"""
Flag management under a fixed budget.

The number of flags on the board never exceeds the mine count.
"""
from .tile import FLAGGED, UNDECIDED, VisibilityGrid


class FlagManager:
    """Places and removes flags on a visibility grid."""

    def __init__(self, tiles: VisibilityGrid, budget: int) -> None:
        """
        Initialize the flag manager.

        Args:
            tiles: Visibility grid shared with the board.
            budget: Number of flags available.
        """
        self._tiles = tiles
        self._remaining = budget

    @property
    def remaining(self) -> int:
        """Flags still available."""
        return self._remaining

    def flag(self, row: int, col: int) -> bool:
        """
        Flag an undecided tile.

        Returns:
            True if the tile was flagged, False if it was not undecided or
            no flags remain.
        """
        if self._remaining < 1 or not self._tiles[row][col].is_undecided:
            return False
        self._tiles[row][col] = FLAGGED
        self._remaining -= 1
        return True

    def unflag(self, row: int, col: int) -> bool:
        """
        Remove a flag.

        Returns:
            True if the tile was flagged and is now undecided.
        """
        if not self._tiles[row][col].is_flagged:
            return False
        self._tiles[row][col] = UNDECIDED
        self._remaining += 1
        return True

    def toggle(self, row: int, col: int) -> bool:
        """Flag an undecided tile or unflag a flagged one."""
        tile = self._tiles[row][col]
        if tile.is_undecided:
            return self.flag(row, col)
        if tile.is_flagged:
            return self.unflag(row, col)
        return False
