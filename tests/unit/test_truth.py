"""
Unit tests for the truth grid.
"""
import numpy as np
import pytest
from minesweeper.truth import UNPLACED, TruthGrid, Unplaced, count_adjacent_mines


class TestUnplaced:
    """Test the unplaced marker."""

    def test_single_instance(self) -> None:
        assert Unplaced() is UNPLACED

    def test_repr(self) -> None:
        assert repr(UNPLACED) == "UNPLACED"


class TestAdjacencyCounts:
    """Test adjacency counting."""

    def test_corner_mine(self, corner_mine_grid) -> None:
        counts = count_adjacent_mines(np.array(corner_mine_grid))
        expected = np.array([
            [0, 1, 0],
            [1, 1, 0],
            [0, 0, 0],
        ])
        # (0, 0) is the mine itself; its count is not used
        counts[0, 0] = 0
        assert np.array_equal(counts, expected)

    def test_surrounded_cell_counts_eight(self) -> None:
        mines = np.ones((3, 3), dtype=bool)
        mines[1, 1] = False
        assert count_adjacent_mines(mines)[1, 1] == 8

    def test_cells_outside_grid_not_counted(self) -> None:
        mines = np.zeros((3, 3), dtype=bool)
        assert not count_adjacent_mines(mines).any()


class TestTruthGrid:
    """Test the immutable truth grid."""

    def test_from_mines(self, corner_mine_grid) -> None:
        truth = TruthGrid.from_mines(corner_mine_grid)
        assert truth.shape == (3, 3)
        assert truth.mine_count == 1
        assert truth.is_mine(0, 0) is True
        assert truth.is_mine(2, 2) is False
        assert truth.count(1, 1) == 1
        assert truth.count(2, 0) == 0

    def test_rejects_non_2d_mask(self) -> None:
        with pytest.raises(ValueError, match="must be 2D"):
            TruthGrid.from_mines([True, False, True])

    def test_mask_is_read_only(self, corner_mine_grid) -> None:
        truth = TruthGrid.from_mines(corner_mine_grid)
        with pytest.raises(ValueError):
            truth.mines[1, 1] = True

    def test_does_not_alias_input(self) -> None:
        mask = np.zeros((3, 3), dtype=bool)
        truth = TruthGrid.from_mines(mask)
        mask[0, 0] = True
        assert truth.is_mine(0, 0) is False
