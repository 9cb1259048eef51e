"""
SavePersonalRecord Use Case.

Resolves a PR claim against the user's history and logs the attempt.

The claim is always saved as a one-set, one-rep, RPE 10 workout whether or
not it beats the previous best; resolution only decides the message. History
is read and the workout written without a lock, so two simultaneous claims
for the same lift can both report a new PR.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from application.exceptions import StorageError
from application.ports import WorkoutRepository
from application.use_cases.save_workout import SaveWorkoutUseCase
from backend.core.pr_resolution import PR_HISTORY_LIMIT, resolve_personal_record
from domain.converters import rows_to_workout_records
from domain.models import ExerciseEntry, PRAction, WorkoutAction

logger = logging.getLogger(__name__)

PR_RPE = 10


@dataclass
class SavePersonalRecordResult:
    """Result of the SavePersonalRecord use case execution."""

    success: bool
    is_new_pr: bool = False
    previous_best: Union[int, float] = 0
    workout_id: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None


def format_weight(weight: Union[int, float]) -> str:
    """140.0 -> '140', 102.5 -> '102.5'."""
    return f"{weight:g}"


def pr_note(action: PRAction) -> str:
    """Note stored on the workout that records a PR claim."""
    return f"🏆 New PR: {action.exercise} {format_weight(action.weight)}{action.unit or 'kg'}"


def pr_message(action: PRAction, is_new_pr: bool, previous_best: Union[int, float]) -> str:
    """User-facing confirmation for a saved PR claim."""
    unit = action.unit or "kg"
    if is_new_pr:
        previous = f" Previous: {format_weight(previous_best)}{unit}" if previous_best else ""
        return (
            f"🎉 New PR! {action.exercise} {format_weight(action.weight)}{unit}!"
            f"{previous} 🏆"
        )
    return f"PR logged: your {action.exercise} workout is saved. Keep pushing! 💪"


class SavePersonalRecordUseCase:
    """
    Use case for confirming a PR claim.

    Orchestrates the following workflow:
    1. Read the most recent workouts
    2. Resolve the previous best (singles preferred over Epley estimates)
    3. Save the claim as a single-rep RPE 10 workout
    4. Report whether it was a new PR

    Usage:
        >>> use_case = SavePersonalRecordUseCase(workout_repo=workout_repo)
        >>> result = use_case.execute(user_id="user-123", action=pr_action)
        >>> result.is_new_pr, result.previous_best
        (True, 130)
    """

    def __init__(self, workout_repo: WorkoutRepository) -> None:
        self._workout_repo = workout_repo
        self._save_workout = SaveWorkoutUseCase(workout_repo=workout_repo)

    def execute(self, user_id: str, action: PRAction) -> SavePersonalRecordResult:
        """
        Execute the PR workflow.

        Args:
            user_id: Owner id
            action: Normalized PR action

        Returns:
            SavePersonalRecordResult; on failure nothing was written
        """
        try:
            rows = self._workout_repo.list_recent(user_id, limit=PR_HISTORY_LIMIT)
        except StorageError as e:
            logger.error(f"Could not read workout history for PR check: {e}")
            return SavePersonalRecordResult(
                success=False, error=f"Failed to save PR: {e.message}"
            )

        resolution = resolve_personal_record(
            action.exercise, action.weight, rows_to_workout_records(rows)
        )

        pr_workout = WorkoutAction(
            exercises=[
                ExerciseEntry(
                    exercise=action.exercise,
                    sets=1,
                    reps=1,
                    weight=action.weight,
                    rpe=PR_RPE,
                    completed=True,
                )
            ],
            session_rpe=PR_RPE,
            notes=pr_note(action),
        )
        saved = self._save_workout.execute(user_id, pr_workout)
        if not saved.success:
            return SavePersonalRecordResult(success=False, error=saved.error)

        logger.info(
            f"PR claim saved for {user_id}: {action.exercise} {action.weight} "
            f"(new={resolution.is_new_pr}, previous={resolution.previous_best})"
        )
        return SavePersonalRecordResult(
            success=True,
            is_new_pr=resolution.is_new_pr,
            previous_best=resolution.previous_best,
            workout_id=saved.workout_id,
            message=pr_message(action, resolution.is_new_pr, resolution.previous_best),
        )
