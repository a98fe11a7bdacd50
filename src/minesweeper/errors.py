"""
Exceptions raised by the Minesweeper board.

Every error derives from MinesweeperError and also from the builtin
exception that best describes it, so callers may catch either.
"""


class MinesweeperError(Exception):
    """Base class for all board errors."""


class InvalidDimensionsError(MinesweeperError, ValueError):
    """Rows or columns outside the supported range."""


class InvalidMinePercentError(MinesweeperError, ValueError):
    """Mine percent not strictly between 0 and 1."""


class InvalidGridError(MinesweeperError, ValueError):
    """Explicit mine grid is empty, ragged, or has an unsupported size."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """Row/column pair lies outside the board."""


class InvalidStateError(MinesweeperError, RuntimeError):
    """Operation is not allowed in the current game state."""
