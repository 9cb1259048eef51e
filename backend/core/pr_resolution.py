"""
Personal record resolution.

Given a claimed PR and the user's recent history, determine the previous
best for the exercise and whether the claim beats it. True singles in the
history are preferred over Epley estimates; see backend.core.one_rep_max.
"""
from dataclasses import dataclass
from typing import Iterable, Union

from domain.models import WorkoutRecord

from backend.core.one_rep_max import best_lift_estimate

Number = Union[int, float]

# Number of most recent workouts scanned for a previous best
PR_HISTORY_LIMIT = 100


@dataclass(frozen=True)
class PRResolution:
    """Outcome of comparing a claimed PR against history."""
    is_new_pr: bool
    previous_best: Number


def find_previous_best(
    exercise: str,
    workouts: Iterable[WorkoutRecord],
    *,
    limit: int = PR_HISTORY_LIMIT,
) -> Number:
    """
    Best known 1RM for ``exercise`` across the most recent workouts.

    Args:
        exercise: Canonical exercise name (matched case-insensitively)
        workouts: Workout history, newest first
        limit: Maximum number of workouts to scan

    Returns:
        Highest single or estimate found, 0 without matching history
    """
    target = exercise.strip().lower()
    previous_best: Number = 0

    for index, workout in enumerate(workouts):
        if index >= limit:
            break
        for lift in workout.lifts:
            if lift.exercise.strip().lower() != target:
                continue
            previous_best = max(previous_best, best_lift_estimate(lift.sets))

    return previous_best


def resolve_personal_record(
    exercise: str,
    claimed_weight: Number,
    workouts: Iterable[WorkoutRecord],
) -> PRResolution:
    """
    Decide whether a claimed weight is a new personal record.

    Args:
        exercise: Canonical exercise name
        claimed_weight: Weight the user claims to have lifted for one rep
        workouts: Workout history, newest first

    Returns:
        PRResolution with the comparison outcome and the previous best

    Examples:
        >>> resolve_personal_record("Squat", 140, [])
        PRResolution(is_new_pr=True, previous_best=0)
    """
    previous_best = find_previous_best(exercise, workouts)
    return PRResolution(
        is_new_pr=claimed_weight > previous_best,
        previous_best=previous_best,
    )
