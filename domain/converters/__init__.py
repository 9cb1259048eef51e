"""
Domain converters for the LiftMind API.

This module provides pure converter functions between coach actions,
domain records and database rows:

- workout_action_to_row: WorkoutAction -> ``workouts`` insert payload
- row_to_workout_record: database row -> WorkoutRecord
- rows_to_workout_records: many rows, skipping malformed ones

Examples:
    >>> from domain.converters import rows_to_workout_records
    >>> records = rows_to_workout_records(repo.list_recent("user-123"))
"""

from domain.converters.workout_rows import (
    DEFAULT_WORKOUT_NOTES,
    entry_to_lift,
    row_to_workout_record,
    rows_to_workout_records,
    workout_action_to_row,
)

__all__ = [
    "DEFAULT_WORKOUT_NOTES",
    "entry_to_lift",
    "workout_action_to_row",
    "row_to_workout_record",
    "rows_to_workout_records",
]
