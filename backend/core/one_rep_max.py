"""
Estimated one-rep-max (1RM) calculations.

This module provides the Epley estimate used everywhere a "best lift" is
needed: PR resolution, the powerlifting dashboard and the coach context.
A true single always beats an estimate: if a lift contains any completed
one-rep set, its best single is the answer; otherwise the best Epley
estimate over completed sets is used.
"""
from typing import Iterable, Union

from domain.models import SetRecord

from backend.core.rounding import round_half_up

Number = Union[int, float]


# =============================================================================
# Formula
# =============================================================================


def estimate_one_rep_max(weight: Number, reps: int) -> Number:
    """
    Estimate 1RM using the Epley formula.

    Formula: 1RM = weight * (1 + reps/30), rounded to the nearest integer.

    A single is returned unchanged (no rounding), so 102.5 x 1 stays 102.5.

    Args:
        weight: Weight lifted
        reps: Number of reps completed

    Returns:
        Estimated 1RM (0 for non-positive reps)
    """
    if reps <= 0:
        return 0
    if reps == 1:
        return weight
    return round_half_up(weight * (1 + reps / 30))


# =============================================================================
# Set Selection
# =============================================================================


def best_single(sets: Iterable[SetRecord]) -> Number:
    """Heaviest one-rep set not explicitly marked as skipped (0 if none)."""
    return max((s.weight or 0 for s in sets if s.is_single), default=0)


def best_lift_estimate(sets: Iterable[SetRecord]) -> Number:
    """
    Best known 1RM for a lift's sets.

    Prefers actual singles; falls back to the best Epley estimate over
    completed sets.

    Args:
        sets: Set records of one lift

    Returns:
        Best single weight, best rounded estimate, or 0 without usable sets
    """
    sets = list(sets)
    singles = [s for s in sets if s.is_single]
    if singles:
        return best_single(singles)

    best = 0
    for s in sets:
        if s.is_completed:
            best = max(best, estimate_one_rep_max(s.weight, s.reps))
    return best
