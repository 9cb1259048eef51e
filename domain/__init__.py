"""
Domain layer for the LiftMind API.

This package contains pure domain models and converters that are independent
of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    AIAction,
    ExerciseEntry,
    LiftRecord,
    SetRecord,
    TrainingType,
    UserPreferences,
    WorkoutRecord,
)

__all__ = [
    "AIAction",
    "ExerciseEntry",
    "LiftRecord",
    "SetRecord",
    "TrainingType",
    "UserPreferences",
    "WorkoutRecord",
]
