"""
Domain models for the LiftMind API.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services):

- ExerciseEntry: flat exercise description emitted by the coach or the log form
- SetRecord / LiftRecord / WorkoutRecord: persisted workout rows
- AIAction: tagged union of coach actions (workout, pr, profile, chat)
- UserPreferences / TrainingType: profile document and training style

Usage:
    >>> from domain.models import ExerciseEntry, WorkoutAction

    >>> action = WorkoutAction(
    ...     exercises=[ExerciseEntry(exercise="Squat", sets=5, reps=5, weight=140)],
    ...     session_rpe=8,
    ... )
"""

from domain.models.actions import (
    AIAction,
    ChatAction,
    ParsedAIResponse,
    PRAction,
    ProfileAction,
    WeightUnit,
    WorkoutAction,
    ai_action_adapter,
)
from domain.models.exercise import DEFAULT_RPE, ExerciseEntry
from domain.models.preferences import ProfileUpdates, TrainingType, UserPreferences
from domain.models.workout import LiftRecord, SetRecord, WorkoutRecord

__all__ = [
    # Records
    "ExerciseEntry",
    "SetRecord",
    "LiftRecord",
    "WorkoutRecord",
    "DEFAULT_RPE",
    # Actions
    "AIAction",
    "WorkoutAction",
    "PRAction",
    "ProfileAction",
    "ChatAction",
    "ParsedAIResponse",
    "WeightUnit",
    "ai_action_adapter",
    # Preferences
    "UserPreferences",
    "ProfileUpdates",
    "TrainingType",
]
