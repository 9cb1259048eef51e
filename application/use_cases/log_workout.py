"""
LogWorkout Use Case.

Manual workout logging from the log form. Entries go through the same
normalization and materialization path as workouts logged by the coach;
weights entered in the other unit are converted to the user's preferred unit
first.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from application.exceptions import StorageError
from application.ports import UserRepository, WorkoutRepository
from application.use_cases.save_workout import SaveWorkoutResult, SaveWorkoutUseCase
from backend.core.action_parser import normalize_action
from backend.core.units import convert_weight
from domain.models import UserPreferences, WeightUnit, WorkoutAction

logger = logging.getLogger(__name__)

MANUAL_WORKOUT_NOTES = "Logged manually"


class LogWorkoutUseCase:
    """
    Use case for manual workout logging.

    Usage:
        >>> use_case = LogWorkoutUseCase(workout_repo=repo, user_repo=users)
        >>> result = use_case.execute("user-123", action, unit="lbs")
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        user_repo: UserRepository,
    ) -> None:
        self._user_repo = user_repo
        self._save_workout = SaveWorkoutUseCase(workout_repo=workout_repo)

    def execute(
        self,
        user_id: str,
        action: WorkoutAction,
        *,
        unit: Optional[WeightUnit] = None,
    ) -> SaveWorkoutResult:
        """
        Log a workout entered by hand.

        Args:
            user_id: Owner id
            action: Exercises and optional session RPE, notes and date
            unit: Unit the weights were entered in; defaults to the user's
                preferred unit (no conversion)

        Returns:
            SaveWorkoutResult from the save workflow
        """
        if unit:
            try:
                preferred = self._preferred_unit(user_id)
            except StorageError as e:
                logger.error(f"Could not read preferences for {user_id}: {e}")
                return SaveWorkoutResult(
                    success=False, error=f"Failed to save workout: {e.message}"
                )
            if unit != preferred:
                action = action.model_copy(update={
                    "exercises": [
                        entry.model_copy(update={
                            "weight": convert_weight(entry.weight, unit, preferred),
                        })
                        for entry in action.exercises
                    ]
                })
                logger.info(f"Converted manual log for {user_id} from {unit} to {preferred}")

        return self._save_workout.execute(
            user_id,
            normalize_action(action),
            default_notes=MANUAL_WORKOUT_NOTES,
        )

    def _preferred_unit(self, user_id: str) -> str:
        user = self._user_repo.get_user(user_id) or {}
        try:
            return UserPreferences.model_validate(user.get("preferences") or {}).units
        except ValidationError as e:
            logger.warning(f"Invalid preferences for {user_id}, logging in kg: {e}")
            return UserPreferences().units
