"""
Converters between coach actions, workout records and database rows.

- workout_action_to_row: WorkoutAction + metrics -> insert payload
- row_to_workout_record: Supabase row -> WorkoutRecord
- rows_to_workout_records: many rows, skipping malformed ones

All converters are pure functions with no side effects.
"""

import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from domain.models import (
    DEFAULT_RPE,
    ExerciseEntry,
    LiftRecord,
    SetRecord,
    WorkoutAction,
    WorkoutRecord,
)

logger = logging.getLogger(__name__)

DEFAULT_WORKOUT_NOTES = "Logged via AI Coach"


def entry_to_lift(entry: ExerciseEntry) -> LiftRecord:
    """
    Expand an exercise entry into ``entry.sets`` identical completed sets.

    Examples:
        >>> lift = entry_to_lift(ExerciseEntry(exercise="Squat", sets=3, reps=5, weight=120))
        >>> len(lift.sets), lift.sets[0].rpe, lift.sets[0].completed
        (3, 7.0, True)
    """
    return LiftRecord(
        exercise=entry.exercise,
        sets=[
            SetRecord(
                reps=entry.reps,
                weight=entry.weight,
                rpe=entry.effective_rpe,
                completed=True,
            )
            for _ in range(entry.sets)
        ],
    )


def workout_action_to_row(
    user_id: str,
    action: WorkoutAction,
    metrics: Dict[str, Any],
    *,
    default_notes: str = DEFAULT_WORKOUT_NOTES,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Build the ``workouts`` insert payload for a workout action.

    Args:
        user_id: Owner id
        action: Normalized workout action
        metrics: total_reps / total_volume / working_sets / rpe_adjusted_volume
        default_notes: Notes used when the action carries none
        today: Day used when the action has no date (defaults to today)

    Returns:
        Dict ready for WorkoutRepository.insert()
    """
    day = action.date or (today or date.today()).isoformat()
    return {
        "user_id": user_id,
        "date": day,
        "lifts": [entry_to_lift(e).model_dump(mode="json") for e in action.exercises],
        "notes": action.notes or default_notes,
        "session_rpe": action.session_rpe or DEFAULT_RPE,
        "total_reps": metrics["total_reps"],
        "total_volume": metrics["total_volume"],
        "working_sets": metrics["working_sets"],
        "rpe_adjusted_volume": metrics["rpe_adjusted_volume"],
    }


def row_to_workout_record(row: Dict[str, Any]) -> WorkoutRecord:
    """
    Convert a database row to a WorkoutRecord.

    Null JSON columns are treated as empty.

    Raises:
        ValidationError: If the row cannot be interpreted as a workout
    """
    data = dict(row)
    data["lifts"] = data.get("lifts") or []
    for key in ("total_reps", "working_sets", "total_volume", "rpe_adjusted_volume"):
        if data.get(key) is None:
            data.pop(key, None)
    return WorkoutRecord.model_validate(data)


def rows_to_workout_records(rows: Iterable[Dict[str, Any]]) -> List[WorkoutRecord]:
    """Convert rows, logging and skipping any that fail validation."""
    records: List[WorkoutRecord] = []
    for row in rows:
        try:
            records.append(row_to_workout_record(row))
        except ValidationError as e:
            logger.warning(f"Skipping malformed workout row {row.get('id')}: {e}")
    return records
