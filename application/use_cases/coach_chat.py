"""
CoachChat Use Case.

One round trip with the AI coach: gather the athlete context, ask the model,
and split its reply into display text and a proposed action. The action is
not applied here; the client confirms it through ConfirmActionUseCase.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from pydantic import ValidationError

from application.exceptions import StorageError
from application.ports import CoachService, UserRepository, WorkoutRepository
from backend.ai.coach_client import CoachServiceError
from backend.ai.coach_prompt import build_user_context
from backend.core.action_parser import parse_ai_response
from domain.converters import rows_to_workout_records
from domain.models import ChatAction, UserPreferences, WorkoutRecord

logger = logging.getLogger(__name__)

CONTEXT_WORKOUT_LIMIT = 30


@dataclass
class CoachChatResult:
    """Result of the CoachChat use case execution."""

    success: bool
    message: Optional[str] = None
    action: Any = None
    confidence: float = 0.0
    error: Optional[str] = None


class CoachChatUseCase:
    """
    Use case for a coach conversation turn.

    Usage:
        >>> use_case = CoachChatUseCase(workout_repo, user_repo, coach)
        >>> result = use_case.execute("user-123", "Just hit 140 squat!", history=[])
        >>> result.action.type
        'pr'
    """

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        user_repo: UserRepository,
        coach: CoachService,
    ) -> None:
        self._workout_repo = workout_repo
        self._user_repo = user_repo
        self._coach = coach

    def execute(
        self,
        user_id: str,
        message: str,
        history: Optional[Sequence[Any]] = None,
    ) -> CoachChatResult:
        """
        Ask the coach and parse its reply.

        The athlete context is best effort: if it cannot be loaded the coach
        still answers, just without it.
        """
        user_context = self._build_context(user_id)

        try:
            reply = self._coach.complete(
                message, history or [], user_context, user_id=user_id
            )
        except CoachServiceError as e:
            logger.error(f"Coach chat failed for {user_id}: {e}")
            return CoachChatResult(success=False, action=ChatAction(), error=e.message)

        parsed = parse_ai_response(reply)
        logger.info(
            f"Coach reply for {user_id}: action={parsed.action.type} "
            f"confidence={parsed.confidence}"
        )
        return CoachChatResult(
            success=True,
            message=parsed.message,
            action=parsed.action,
            confidence=parsed.confidence,
        )

    def _build_context(self, user_id: str) -> str:
        try:
            user = self._user_repo.get_user(user_id) or {}
            rows = self._workout_repo.list_recent(user_id, limit=CONTEXT_WORKOUT_LIMIT)
        except StorageError as e:
            logger.warning(f"Coach context unavailable for {user_id}: {e}")
            return ""

        preferences = None
        if user.get("preferences"):
            try:
                preferences = UserPreferences.model_validate(user["preferences"])
            except ValidationError as e:
                logger.warning(f"Ignoring invalid preferences for {user_id}: {e}")
                preferences = UserPreferences()
        workouts: List[WorkoutRecord] = rows_to_workout_records(rows)
        return build_user_context(preferences, workouts, name=user.get("name"))
