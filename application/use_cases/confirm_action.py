"""
ConfirmAction Use Case.

The coach proposes an action; nothing is written until the user confirms it.
This use case routes a confirmed action to the workflow that applies it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from application.exceptions import ActionNotSupportedError
from application.ports import UserRepository, WorkoutRepository
from application.use_cases.save_personal_record import SavePersonalRecordUseCase
from application.use_cases.save_workout import SaveWorkoutUseCase
from application.use_cases.update_profile import UpdateProfileUseCase
from backend.core.action_parser import normalize_action
from domain.models import PRAction, ProfileAction, WorkoutAction

logger = logging.getLogger(__name__)

WORKOUT_LOGGED_MESSAGE = (
    "✅ Workout logged! Check your dashboard and progress page to see updated stats. 💪"
)


@dataclass
class ConfirmActionResult:
    """Result of applying a confirmed coach action."""

    success: bool
    action_type: str
    message: Optional[str] = None
    workout_id: Optional[str] = None
    is_new_pr: Optional[bool] = None
    previous_best: Optional[Union[int, float]] = None
    preferences: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class ConfirmActionUseCase:
    """
    Apply a confirmed coach action.

    - workout: save the workout
    - pr: resolve against history, then save the attempt
    - profile: merge the preferences patch
    - chat: rejected with ActionNotSupportedError
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        user_repo: UserRepository,
    ) -> None:
        self._save_workout = SaveWorkoutUseCase(workout_repo=workout_repo)
        self._save_pr = SavePersonalRecordUseCase(workout_repo=workout_repo)
        self._update_profile = UpdateProfileUseCase(user_repo=user_repo)

    def execute(self, user_id: str, action) -> ConfirmActionResult:
        """
        Apply ``action`` for ``user_id``.

        The action is normalized again so that payloads edited on the client
        are canonicalized the same way as parsed ones.

        Raises:
            ActionNotSupportedError: For chat actions, which have no side effect
        """
        action = normalize_action(action)

        if isinstance(action, WorkoutAction):
            saved = self._save_workout.execute(user_id, action)
            return ConfirmActionResult(
                success=saved.success,
                action_type=action.type,
                message=WORKOUT_LOGGED_MESSAGE if saved.success else None,
                workout_id=saved.workout_id,
                error=saved.error,
                validation_errors=saved.validation_errors,
            )

        if isinstance(action, PRAction):
            pr = self._save_pr.execute(user_id, action)
            return ConfirmActionResult(
                success=pr.success,
                action_type=action.type,
                message=pr.message,
                workout_id=pr.workout_id,
                is_new_pr=pr.is_new_pr if pr.success else None,
                previous_best=pr.previous_best if pr.success else None,
                error=pr.error,
            )

        if isinstance(action, ProfileAction):
            profile = self._update_profile.execute(user_id, action.updates)
            return ConfirmActionResult(
                success=profile.success,
                action_type=action.type,
                message=profile.message,
                preferences=profile.preferences if profile.success else None,
                error=profile.error,
            )

        logger.warning(f"Rejected confirmation of {getattr(action, 'type', action)!r} action")
        raise ActionNotSupportedError("Chat actions have nothing to confirm")
