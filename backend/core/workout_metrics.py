"""
Workout summary metrics.

Computes the four aggregates stored on every workout row at save time:
total reps, total volume (tonnage), working sets and RPE-adjusted volume.
A set counts as a working set when its RPE is 7 or higher; entries without
an RPE are treated as RPE 7.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable

from domain.models import ExerciseEntry

from backend.core.rounding import round_half_up

WORKING_SET_RPE_THRESHOLD = 7


@dataclass(frozen=True)
class WorkoutMetrics:
    """Aggregates derived from a list of exercise entries."""
    total_reps: int
    total_volume: int
    working_sets: int
    rpe_adjusted_volume: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def calculate_workout_metrics(exercises: Iterable[ExerciseEntry]) -> WorkoutMetrics:
    """
    Calculate summary metrics for a set of exercise entries.

    Args:
        exercises: Validated exercise entries (all sets of an entry identical)

    Returns:
        WorkoutMetrics with volumes rounded half-up to integers

    Examples:
        >>> bench = ExerciseEntry(exercise="Bench Press", sets=5, reps=5, weight=100, rpe=7)
        >>> calculate_workout_metrics([bench])
        WorkoutMetrics(total_reps=25, total_volume=2500, working_sets=5, rpe_adjusted_volume=1750)
    """
    total_reps = 0
    total_volume = 0.0
    working_sets = 0
    rpe_adjusted_volume = 0.0

    for entry in exercises:
        reps = entry.sets * entry.reps
        volume = reps * entry.weight
        rpe = entry.effective_rpe

        total_reps += reps
        total_volume += volume
        rpe_adjusted_volume += volume * rpe / 10
        if rpe >= WORKING_SET_RPE_THRESHOLD:
            working_sets += entry.sets

    return WorkoutMetrics(
        total_reps=total_reps,
        total_volume=round_half_up(total_volume),
        working_sets=working_sets,
        rpe_adjusted_volume=round_half_up(rpe_adjusted_volume),
    )
