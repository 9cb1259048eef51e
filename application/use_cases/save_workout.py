"""
SaveWorkout Use Case.

Persists a workout action confirmed by the user: computes the summary
metrics, materializes each exercise entry into explicit set records and
inserts the row.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from application.exceptions import StorageError
from application.ports import WorkoutRepository
from backend.core.workout_metrics import WorkoutMetrics, calculate_workout_metrics
from domain.converters import DEFAULT_WORKOUT_NOTES, workout_action_to_row
from domain.models import WorkoutAction

logger = logging.getLogger(__name__)


class WorkoutValidationError(Exception):
    """Raised when a workout action cannot be saved as given."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass
class SaveWorkoutResult:
    """Result of the SaveWorkout use case execution."""

    success: bool
    workout_id: Optional[str] = None
    metrics: Optional[WorkoutMetrics] = None
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class SaveWorkoutUseCase:
    """
    Use case for saving workouts logged through the coach or the log form.

    Orchestrates the following workflow:
    1. Reject actions without exercises
    2. Compute summary metrics
    3. Convert the action to a row (set records, defaults)
    4. Persist via repository

    Usage:
        >>> use_case = SaveWorkoutUseCase(workout_repo=workout_repo)
        >>> result = use_case.execute(user_id="user-123", action=action)
        >>> if result.success:
        ...     print(f"Saved workout: {result.workout_id}")
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            workout_repo: Repository for persisting workouts
        """
        self._workout_repo = workout_repo

    def execute(
        self,
        user_id: str,
        action: WorkoutAction,
        *,
        default_notes: str = DEFAULT_WORKOUT_NOTES,
        today: Optional[date] = None,
    ) -> SaveWorkoutResult:
        """
        Execute the save workout workflow.

        Args:
            user_id: Owner id
            action: Normalized workout action
            default_notes: Notes stored when the action carries none
            today: Day used when the action has no date

        Returns:
            SaveWorkoutResult with the new workout id and its metrics
        """
        try:
            self._validate(action)

            metrics = calculate_workout_metrics(action.exercises)
            row = workout_action_to_row(
                user_id,
                action,
                metrics.to_dict(),
                default_notes=default_notes,
                today=today,
            )

            saved = self._workout_repo.insert(row)
            workout_id = saved.get("id") or ""

            logger.info(
                f"Workout saved for {user_id}: {workout_id} "
                f"({len(action.exercises)} exercises, volume {metrics.total_volume})"
            )
            return SaveWorkoutResult(success=True, workout_id=workout_id, metrics=metrics)

        except WorkoutValidationError as e:
            logger.warning(f"Workout validation error: {e}")
            return SaveWorkoutResult(
                success=False,
                error="Workout validation failed",
                validation_errors=[e.message],
            )

        except StorageError as e:
            logger.error(f"SaveWorkout use case failed: {e}")
            return SaveWorkoutResult(success=False, error=f"Failed to save workout: {e.message}")

    @staticmethod
    def _validate(action: WorkoutAction) -> None:
        if not action.exercises:
            raise WorkoutValidationError("Workout must contain at least one exercise")
        if action.date:
            try:
                date.fromisoformat(action.date[:10])
            except ValueError:
                raise WorkoutValidationError(f"Invalid workout date: {action.date}")
