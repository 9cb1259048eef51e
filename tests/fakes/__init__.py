"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of the port interfaces
for fast, isolated testing. No database or language model required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Supports fail_with() to simulate storage / provider failures
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRepository, workout_row, lift

    repo = FakeWorkoutRepository()
    repo.seed([workout_row("2024-01-05", lift("Squat", (5, 100), (1, 140)))])
"""
from typing import Any, Dict, Iterable, Optional, Tuple
from datetime import date
import uuid

from tests.fakes.workout_repository import FakeWorkoutRepository
from tests.fakes.user_repository import FakeUserRepository
from tests.fakes.coach_service import FakeCoachService


# =============================================================================
# Row Builders
# =============================================================================


def lift(exercise: str, *sets: Tuple) -> Dict[str, Any]:
    """
    Build a stored lift.

    Each set is ``(reps, weight)``, ``(reps, weight, completed)`` or
    ``(reps, weight, completed, rpe)``; completed defaults to True.

    Examples:
        >>> lift("Bench Press", (5, 100), (1, 110, False))["sets"][1]["completed"]
        False
    """
    built = []
    for s in sets:
        reps, weight = s[0], s[1]
        completed = s[2] if len(s) > 2 else True
        rpe = s[3] if len(s) > 3 else 7
        built.append({"reps": reps, "weight": weight, "rpe": rpe, "completed": completed})
    return {"exercise": exercise, "sets": built}


def workout_row(
    day: Any,
    *lifts: Dict[str, Any],
    user_id: str = "test_user",
    session_rpe: Optional[float] = None,
    workout_id: Optional[str] = None,
    notes: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a stored workout row; aggregates are derived from the lifts."""
    if isinstance(day, date):
        day = day.isoformat()
    total_reps = 0
    total_volume = 0.0
    for item in lifts:
        for s in item["sets"]:
            if s.get("completed") is True:
                total_reps += s["reps"]
                total_volume += s["reps"] * s["weight"]
    return {
        "id": workout_id or str(uuid.uuid4()),
        "user_id": user_id,
        "date": day,
        "lifts": list(lifts),
        "notes": notes,
        "session_rpe": session_rpe,
        "total_reps": total_reps,
        "total_volume": round(total_volume),
        "working_sets": 0,
        "rpe_adjusted_volume": 0,
    }


# =============================================================================
# Factory Functions
# =============================================================================


def create_workout_repo(rows: Iterable[Dict[str, Any]] = ()) -> FakeWorkoutRepository:
    """
    Create a FakeWorkoutRepository pre-populated with rows.

    Args:
        rows: Workout rows, typically built with workout_row()

    Returns:
        Pre-populated FakeWorkoutRepository
    """
    repo = FakeWorkoutRepository()
    repo.seed(list(rows))
    return repo


def create_user_repo(
    *,
    user_id: str = "test_user",
    name: Optional[str] = "Test User",
    preferences: Optional[Dict[str, Any]] = None,
) -> FakeUserRepository:
    """
    Create a FakeUserRepository with one user.

    Args:
        user_id: User ID
        name: Display name
        preferences: Stored preferences document

    Returns:
        Pre-populated FakeUserRepository
    """
    repo = FakeUserRepository()
    repo.seed([{"id": user_id, "name": name, "preferences": preferences or {}}])
    return repo


__all__ = [
    # Fakes
    "FakeWorkoutRepository",
    "FakeUserRepository",
    "FakeCoachService",
    # Builders
    "lift",
    "workout_row",
    # Factories
    "create_workout_repo",
    "create_user_repo",
]
