"""
Mine placement for randomly generated boards.

Mines are sampled uniformly without replacement from every cell outside
an exclusion zone anchored at the first uncovered tile.
"""
import logging
import random
from typing import Iterable, List, Set

import numpy as np

from .grid import Position, index_to_position, neighborhood, position_to_index

logger = logging.getLogger(__name__)

# A 3x3 opening needs nine mine-free cells.
EASY_START_AREA = 9


def exclusion_zone(
    rows: int,
    cols: int,
    anchor: Position,
    mine_count: int,
    easy_start: bool,
) -> Set[Position]:
    """
    Get the cells that must stay mine-free.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        anchor: First uncovered (row, col).
        mine_count: Number of mines to place.
        easy_start: Whether the anchor should open onto a zero.

    Returns:
        The anchor alone, or its clipped 3x3 neighborhood when an easy
        start was requested and enough safe cells exist.
    """
    row, col = anchor
    if not easy_start or rows * cols - mine_count < EASY_START_AREA:
        return {anchor}
    return set(neighborhood(rows, cols, row, col))


def sample_mines(
    rows: int,
    cols: int,
    mine_count: int,
    excluded: Iterable[Position],
    rng: random.Random,
) -> List[Position]:
    """
    Pick mine_count distinct cells outside the excluded set.

    Raises:
        ValueError: If there are fewer candidate cells than mines.
    """
    excluded_indices = {position_to_index(cols, row, col) for row, col in excluded}
    candidates = [
        index for index in range(rows * cols) if index not in excluded_indices
    ]
    if mine_count > len(candidates):
        raise ValueError(
            f"Cannot place {mine_count} mines in {len(candidates)} free cells"
        )
    return [
        index_to_position(cols, index)
        for index in rng.sample(candidates, mine_count)
    ]


def place_mines(
    rows: int,
    cols: int,
    mine_count: int,
    anchor: Position,
    easy_start: bool,
    rng: random.Random,
) -> np.ndarray:
    """
    Build a boolean mine mask keeping the exclusion zone clear.

    Returns:
        (rows, cols) bool array, True where a mine sits.
    """
    zone = exclusion_zone(rows, cols, anchor, mine_count, easy_start)
    logger.debug(
        "Placing %d mines on %dx%d board (anchor=%s, zone=%d cells)",
        mine_count, rows, cols, anchor, len(zone),
    )
    mines = np.zeros((rows, cols), dtype=bool)
    for row, col in sample_mines(rows, cols, mine_count, zone, rng):
        mines[row, col] = True
    return mines
