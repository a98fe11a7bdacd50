"""
Unit tests for mine placement.

Tests exclusion zones, sampling guarantees and the mine mask.
"""
import random

import numpy as np
import pytest
from minesweeper.placement import exclusion_zone, place_mines, sample_mines


# ============================================================================
# Exclusion Zone Tests
# ============================================================================

class TestExclusionZone:
    """Test which cells are kept clear."""

    def test_without_easy_start_only_anchor(self) -> None:
        assert exclusion_zone(10, 10, (4, 4), 15, False) == {(4, 4)}

    def test_easy_start_excludes_neighborhood(self) -> None:
        zone = exclusion_zone(10, 10, (4, 4), 15, True)
        assert len(zone) == 9
        assert zone == {(r, c) for r in range(3, 6) for c in range(3, 6)}

    def test_easy_start_zone_clipped_at_corner(self) -> None:
        zone = exclusion_zone(10, 10, (0, 0), 15, True)
        assert zone == {(0, 0), (0, 1), (1, 0), (1, 1)}

    def test_easy_start_falls_back_when_safe_area_small(self) -> None:
        # 16 cells, 8 mines -> 8 safe cells, fewer than 9
        assert exclusion_zone(4, 4, (1, 1), 8, True) == {(1, 1)}

    def test_easy_start_kept_with_exactly_nine_safe(self) -> None:
        zone = exclusion_zone(4, 4, (1, 1), 7, True)
        assert len(zone) == 9


# ============================================================================
# Sampling Tests
# ============================================================================

class TestSampleMines:
    """Test uniform sampling without replacement."""

    def test_returns_requested_count_of_distinct_cells(self) -> None:
        mines = sample_mines(10, 10, 30, {(0, 0)}, random.Random(1))
        assert len(mines) == 30
        assert len(set(mines)) == 30

    def test_never_samples_excluded_cells(self) -> None:
        excluded = {(r, c) for r in range(3) for c in range(3)}
        for seed in range(50):
            mines = sample_mines(5, 5, 16, excluded, random.Random(seed))
            assert excluded.isdisjoint(mines)

    def test_fills_every_candidate_when_count_matches(self) -> None:
        mines = sample_mines(3, 3, 8, {(1, 1)}, random.Random(0))
        assert set(mines) == {(r, c) for r in range(3) for c in range(3)} - {(1, 1)}

    def test_too_many_mines_raises(self) -> None:
        with pytest.raises(ValueError, match="Cannot place"):
            sample_mines(3, 3, 9, {(1, 1)}, random.Random(0))

    def test_same_seed_same_mines(self) -> None:
        first = sample_mines(10, 10, 20, {(5, 5)}, random.Random(42))
        second = sample_mines(10, 10, 20, {(5, 5)}, random.Random(42))
        assert first == second

    def test_every_candidate_can_be_chosen(self) -> None:
        rng = random.Random(7)
        seen = set()
        for _ in range(200):
            seen.update(sample_mines(3, 3, 1, {(0, 0)}, rng))
        assert seen == {(r, c) for r in range(3) for c in range(3)} - {(0, 0)}


# ============================================================================
# Mine Mask Tests
# ============================================================================

class TestPlaceMines:
    """Test the mine mask produced for a board."""

    def test_mask_shape_and_count(self) -> None:
        mask = place_mines(6, 8, 12, (2, 3), False, random.Random(3))
        assert mask.shape == (6, 8)
        assert mask.dtype == np.bool_
        assert int(mask.sum()) == 12

    def test_anchor_is_clear(self) -> None:
        for seed in range(30):
            mask = place_mines(3, 3, 8, (1, 1), False, random.Random(seed))
            assert not mask[1, 1]

    def test_easy_start_clears_neighborhood(self) -> None:
        for seed in range(30):
            mask = place_mines(6, 6, 27, (2, 2), True, random.Random(seed))
            assert not mask[1:4, 1:4].any()
