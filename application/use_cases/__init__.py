"""
Application Use Cases for the LiftMind API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses, not API responses

Usage:
    from application.use_cases import ConfirmActionUseCase, CoachChatUseCase

    chat = CoachChatUseCase(workout_repo, user_repo, coach)
    turn = chat.execute(user_id="user-123", message="Benched 100x5 today")

    if turn.action.type != "chat":
        confirm = ConfirmActionUseCase(workout_repo, user_repo)
        result = confirm.execute("user-123", turn.action)
"""

from application.use_cases.save_workout import (
    SaveWorkoutUseCase,
    SaveWorkoutResult,
    WorkoutValidationError,
)
from application.use_cases.log_workout import LogWorkoutUseCase
from application.use_cases.save_personal_record import (
    SavePersonalRecordUseCase,
    SavePersonalRecordResult,
)
from application.use_cases.update_profile import (
    UpdateProfileUseCase,
    UpdateProfileResult,
)
from application.use_cases.confirm_action import (
    ConfirmActionUseCase,
    ConfirmActionResult,
)
from application.use_cases.get_metrics import (
    GetDashboardMetricsUseCase,
    GetProgressMetricsUseCase,
    GetMetricsResult,
)
from application.use_cases.coach_chat import (
    CoachChatUseCase,
    CoachChatResult,
)

__all__ = [
    # SaveWorkout
    "SaveWorkoutUseCase",
    "SaveWorkoutResult",
    "WorkoutValidationError",
    # LogWorkout
    "LogWorkoutUseCase",
    # SavePersonalRecord
    "SavePersonalRecordUseCase",
    "SavePersonalRecordResult",
    # UpdateProfile
    "UpdateProfileUseCase",
    "UpdateProfileResult",
    # ConfirmAction
    "ConfirmActionUseCase",
    "ConfirmActionResult",
    # Metrics
    "GetDashboardMetricsUseCase",
    "GetProgressMetricsUseCase",
    "GetMetricsResult",
    # CoachChat
    "CoachChatUseCase",
    "CoachChatResult",
]
