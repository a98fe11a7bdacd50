"""
Grid utilities for Minesweeper boards.

Positions are plain (row, col) tuples. Helpers here assume the board
dimensions are already valid.
"""
from typing import Iterator, List, Tuple

Position = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if not (delta_row == 0 and delta_col == 0)
)


def is_in_bounds(rows: int, cols: int, row: int, col: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= row < rows and 0 <= col < cols


def iter_neighbors(rows: int, cols: int, row: int, col: int) -> Iterator[Position]:
    """Yield in-bounds neighbors of (row, col), excluding the cell itself."""
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        new_row = row + delta_row
        new_col = col + delta_col
        if is_in_bounds(rows, cols, new_row, new_col):
            yield new_row, new_col


def get_neighbors(rows: int, cols: int, row: int, col: int) -> List[Position]:
    """
    Get valid neighboring cell positions.

    Args:
        rows: Number of rows on the board.
        cols: Number of columns on the board.
        row: Row index of center cell.
        col: Column index of center cell.

    Returns:
        List of (row, col) tuples for valid neighbors (3 to 8 of them).
    """
    return list(iter_neighbors(rows, cols, row, col))


def neighborhood(rows: int, cols: int, row: int, col: int) -> List[Position]:
    """Get the 3x3 block centered on (row, col), clipped to the board."""
    return [(row, col)] + get_neighbors(rows, cols, row, col)


def position_to_index(cols: int, row: int, col: int) -> int:
    """Convert (row, col) position to flat index."""
    return row * cols + col


def index_to_position(cols: int, index: int) -> Position:
    """Convert flat index to (row, col) position."""
    return index // cols, index % cols
