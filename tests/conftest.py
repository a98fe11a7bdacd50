"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
# Project root, for the command line entry point
sys.path.insert(0, str(Path(__file__).parent.parent))

from minesweeper import Board, BoardConfig


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_grid():
    """3x3 grid with a single mine in the top-left corner."""
    return [
        [True, False, False],
        [False, False, False],
        [False, False, False],
    ]


@pytest.fixture
def split_grid():
    """5x5 grid whose mine column splits the board into two regions."""
    return [
        [False, False, True, False, False],
        [False, False, True, False, False],
        [False, False, True, False, False],
        [False, False, True, False, False],
        [False, False, True, False, False],
    ]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded generator for reproducible placement."""
    return random.Random(1234)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a default 9x9 board with 15% mines."""
    return Board(rng=rng)


@pytest.fixture
def ten_by_ten_board(rng: random.Random) -> Board:
    """10x10 board with 10 mines."""
    return Board.new_board(10, 10, 0.1, rng=rng)


@pytest.fixture
def corner_mine_board(corner_mine_grid) -> Board:
    """3x3 explicit board with a mine at (0, 0)."""
    return Board.from_grid(corner_mine_grid)


@pytest.fixture
def split_board(split_grid) -> Board:
    """5x5 explicit board with a mine column at col 2."""
    return Board.from_grid(split_grid)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 0.15)
