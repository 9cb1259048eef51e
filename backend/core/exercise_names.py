"""
Exercise name canonicalization.

Maps the shorthand people type ("bp", "dl", "ohp") onto the canonical names
stored with workouts, so that history lookups and PR comparisons line up.
Anything not in the alias table is title-cased token by token.
"""
from types import MappingProxyType
from typing import Mapping


EXERCISE_ALIASES: Mapping[str, str] = MappingProxyType({
    "bench": "Bench Press",
    "bench press": "Bench Press",
    "bp": "Bench Press",
    "squat": "Squat",
    "back squat": "Squat",
    "deadlift": "Deadlift",
    "dl": "Deadlift",
    "dead lift": "Deadlift",
    "ohp": "Overhead Press",
    "overhead press": "Overhead Press",
    "press": "Overhead Press",
    "military press": "Overhead Press",
})


def _title_case(name: str) -> str:
    # Split on single spaces so repeated whitespace is preserved as-is
    return " ".join(word[:1].upper() + word[1:].lower() for word in name.split(" "))


def normalize_exercise_name(raw: str) -> str:
    """
    Canonicalize a free-text exercise name.

    Args:
        raw: Name as typed by the user or emitted by the coach

    Returns:
        Canonical display name, e.g. "bp" -> "Bench Press",
        "incline dumbbell press" -> "Incline Dumbbell Press"
    """
    if raw is None:
        return ""
    key = raw.strip().lower()
    alias = EXERCISE_ALIASES.get(key)
    if alias:
        return alias
    return _title_case(raw)
