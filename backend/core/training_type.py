"""Training type helpers: labels, primary exercises and relevance checks."""
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from domain.models import TrainingType, UserPreferences


TRAINING_TYPE_LABELS: Mapping[TrainingType, str] = MappingProxyType({
    TrainingType.POWERLIFTING: "Powerlifting",
    TrainingType.BODYBUILDING: "Bodybuilding",
    TrainingType.CROSSFIT: "CrossFit",
    TrainingType.CALISTHENICS: "Calisthenics",
    TrainingType.GENERAL_STRENGTH: "General Strength",
    TrainingType.ENDURANCE: "Endurance",
    TrainingType.FUNCTIONAL_FITNESS: "Functional Fitness",
})

PRIMARY_EXERCISES: Mapping[TrainingType, Tuple[str, ...]] = MappingProxyType({
    TrainingType.POWERLIFTING: ("Squat", "Bench Press", "Deadlift"),
    TrainingType.BODYBUILDING: (
        "Bicep Curl", "Tricep Extension", "Lateral Raise", "Leg Press", "Chest Fly",
    ),
    TrainingType.CROSSFIT: ("Pull-up", "Push-up", "Burpee", "Box Jump", "Kettlebell Swing"),
    TrainingType.CALISTHENICS: ("Pull-up", "Push-up", "Dip", "Muscle-up", "Handstand"),
    TrainingType.GENERAL_STRENGTH: (
        "Squat", "Bench Press", "Deadlift", "Overhead Press", "Barbell Row",
    ),
    TrainingType.ENDURANCE: ("Running", "Cycling", "Rowing", "Elliptical"),
    TrainingType.FUNCTIONAL_FITNESS: (
        "Kettlebell Swing", "Turkish Get-up", "Farmer Walk", "Battle Ropes",
    ),
})


def get_training_type(preferences: Optional[Any]) -> TrainingType:
    """
    Resolve the training type from a preferences document.

    Accepts a UserPreferences model or the raw dict stored on the user row.
    Missing or unknown values fall back to general strength.
    """
    if preferences is None:
        return TrainingType.GENERAL_STRENGTH
    if isinstance(preferences, UserPreferences):
        return preferences.training_type
    if isinstance(preferences, dict):
        return TrainingType.coerce(preferences.get("trainingType"))
    return TrainingType.GENERAL_STRENGTH


def training_type_label(training_type: TrainingType) -> str:
    return TRAINING_TYPE_LABELS[TrainingType.coerce(training_type)]


def primary_exercises(training_type: TrainingType) -> Tuple[str, ...]:
    return PRIMARY_EXERCISES[TrainingType.coerce(training_type)]


def is_exercise_relevant(exercise_name: str, training_type: TrainingType) -> bool:
    """True when the name contains one of the type's primary exercises."""
    name = exercise_name.lower()
    return any(primary.lower() in name for primary in primary_exercises(training_type))
