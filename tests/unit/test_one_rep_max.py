"""
Unit tests for the estimated 1RM engine.

Tests for:
- Epley formula with half-up rounding
- Singles returned unchanged
- Best lift selection (singles preferred over estimates)
"""

import pytest

from backend.core.one_rep_max import best_lift_estimate, best_single, estimate_one_rep_max
from domain.models import SetRecord


def _set(reps, weight, completed=True):
    return SetRecord(reps=reps, weight=weight, rpe=7, completed=completed)


@pytest.mark.unit
class TestEstimateOneRepMax:

    def test_single_is_returned_unchanged(self):
        assert estimate_one_rep_max(102.5, 1) == 102.5
        assert estimate_one_rep_max(140, 1) == 140

    def test_epley_formula(self):
        # 100 * (1 + 5/30) = 116.67
        assert estimate_one_rep_max(100, 5) == 117

    def test_half_rounds_up(self):
        # 95 * (1 + 3/30) = 104.5
        assert estimate_one_rep_max(95, 3) == 105

    def test_non_positive_reps(self):
        assert estimate_one_rep_max(100, 0) == 0

    @pytest.mark.parametrize("weight", [20, 60, 100, 180])
    def test_increases_with_reps(self, weight):
        estimates = [estimate_one_rep_max(weight, reps) for reps in (1, 4, 8, 12)]
        assert estimates == sorted(estimates)
        assert len(set(estimates)) == len(estimates)


@pytest.mark.unit
class TestBestLiftEstimate:

    def test_true_single_beats_heavier_estimate(self):
        """100x1 wins over 95x3 even though Epley gives 105."""
        sets = [_set(3, 95), _set(1, 100)]
        assert best_lift_estimate(sets) == 100

    def test_falls_back_to_best_estimate(self):
        sets = [_set(5, 100), _set(3, 105)]
        # 100x5 -> 117, 105x3 -> 115.5 -> 116
        assert best_lift_estimate(sets) == 117

    def test_incomplete_sets_do_not_count_for_estimates(self):
        sets = [_set(5, 200, completed=False), _set(5, 100)]
        assert best_lift_estimate(sets) == 117

    def test_single_without_completed_flag_counts(self):
        sets = [SetRecord(reps=1, weight=150), _set(5, 100)]
        assert best_lift_estimate(sets) == 150

    def test_skipped_single_is_ignored(self):
        sets = [_set(1, 200, completed=False), _set(5, 100)]
        assert best_single(sets) == 0
        assert best_lift_estimate(sets) == 117

    def test_empty(self):
        assert best_lift_estimate([]) == 0
