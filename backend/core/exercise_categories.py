"""
Keyword tables used to bucket exercises by name.

Matching is a case-insensitive substring test and the first matching entry
wins, so the order of the tables is significant (e.g. "bench" is checked as
Chest before "press" can classify it as Shoulders).
"""
from typing import Iterable, Optional, Tuple

from domain.models import WorkoutRecord

from backend.core.rounding import round_one_decimal


MUSCLE_GROUP_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("Chest", ("chest", "bench", "fly")),
    ("Back", ("back", "row", "pull")),
    ("Legs", ("leg", "squat")),
    ("Shoulders", ("shoulder", "press")),
    ("Arms", ("arm", "curl", "tricep")),
)

FUNCTIONAL_KEYWORDS: Tuple[str, ...] = (
    "pull-up", "push-up", "burpee", "box jump", "kettlebell", "row",
)

BODYWEIGHT_KEYWORDS: Tuple[str, ...] = (
    "pull-up", "push-up", "dip", "muscle-up", "handstand", "pistol",
)

POWERLIFTS: Tuple[Tuple[str, str], ...] = (
    ("squat", "Squat"),
    ("bench", "Bench"),
    ("deadlift", "Deadlift"),
)


def classify_muscle_group(exercise: str) -> Optional[str]:
    """Muscle group for an exercise name, or None when no keyword matches."""
    name = exercise.lower()
    for group, keywords in MUSCLE_GROUP_KEYWORDS:
        if any(keyword in name for keyword in keywords):
            return group
    return None


def match_keyword(exercise: str, keywords: Iterable[str]) -> Optional[str]:
    """First keyword contained in the exercise name, or None."""
    name = exercise.lower()
    for keyword in keywords:
        if keyword in name:
            return keyword
    return None


def display_keyword(keyword: str) -> str:
    """'pull-up' -> 'Pull-up'."""
    return keyword[:1].upper() + keyword[1:]


def average_session_rpe(workouts: Iterable[WorkoutRecord]) -> float:
    """
    Mean session RPE over workouts that recorded one.

    Workouts without a session RPE are left out rather than counted as 0.

    Returns:
        Mean rounded to one decimal, or 0 when no workout has a session RPE
    """
    rpes = [w.session_rpe for w in workouts if w.session_rpe]
    if not rpes:
        return 0
    return round_one_decimal(sum(rpes) / len(rpes))
