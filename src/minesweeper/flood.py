"""
Flood reveal of tiles.

Uncovering a zero tile opens every connected zero tile plus the ring of
numbered tiles around them. The cascade runs on an explicit worklist so
its depth does not depend on board size.
"""
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Set

from .flags import FlagManager
from .grid import Position, iter_neighbors
from .tile import EXPLODED, Tile, VisibilityGrid
from .truth import TruthGrid


@dataclass
class RevealOutcome:
    """
    Result of a single reveal call.

    Attributes:
        revealed: Number of safe tiles newly revealed.
        exploded: Position of the mine hit, if any.
    """

    revealed: int = 0
    exploded: Optional[Position] = None


def flood_reveal(
    truth: TruthGrid,
    tiles: VisibilityGrid,
    flags: FlagManager,
    row: int,
    col: int,
) -> RevealOutcome:
    """
    Reveal (row, col) and cascade through zero-count tiles.

    Already uncovered tiles are left alone. Flagged tiles are unflagged
    before being revealed or exploded, so the flag returns to the budget.

    Args:
        truth: Placed truth grid.
        tiles: Visibility grid, updated in place.
        flags: Flag manager sharing the same visibility grid.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        RevealOutcome describing what changed.
    """
    outcome = RevealOutcome()
    if tiles[row][col].is_uncovered:
        return outcome

    if truth.is_mine(row, col):
        flags.unflag(row, col)
        tiles[row][col] = EXPLODED
        outcome.exploded = (row, col)
        return outcome

    rows, cols = truth.shape
    worklist: Deque[Position] = deque([(row, col)])
    queued: Set[Position] = {(row, col)}
    while worklist:
        current_row, current_col = worklist.pop()
        if tiles[current_row][current_col].is_uncovered:
            continue

        flags.unflag(current_row, current_col)
        count = truth.count(current_row, current_col)
        tiles[current_row][current_col] = Tile.revealed(count)
        outcome.revealed += 1

        if count == 0:
            for neighbor in iter_neighbors(rows, cols, current_row, current_col):
                neighbor_row, neighbor_col = neighbor
                if neighbor in queued:
                    continue
                if not tiles[neighbor_row][neighbor_col].is_uncovered:
                    queued.add(neighbor)
                    worklist.append(neighbor)

    return outcome
