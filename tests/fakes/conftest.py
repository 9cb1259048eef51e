"""
Test Fixtures and Helpers for Fake Repositories.

This module provides pytest fixtures and helper functions for overriding
FastAPI dependencies with fake implementations on an app built by
backend.main.create_app().

Usage:
    from tests.fakes.conftest import override_fakes

    app = create_app(settings=test_settings)
    fakes = override_fakes(app)
    fakes["workout_repo"].seed([...])
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI

from api import deps
from tests.fakes import FakeCoachService, FakeUserRepository, FakeWorkoutRepository

TEST_USER_ID = "test_user"


def override_fakes(
    app: FastAPI,
    *,
    user_id: str = TEST_USER_ID,
    workout_repo: Optional[FakeWorkoutRepository] = None,
    user_repo: Optional[FakeUserRepository] = None,
    coach: Optional[FakeCoachService] = None,
) -> Dict[str, Any]:
    """
    Override auth, repositories and the coach on ``app`` with fakes.

    Use cases are built by their regular providers on top of the fakes, so
    the full request path is exercised.

    Returns:
        Dict with the fake instances for seeding test data
    """
    workout_repo = workout_repo or FakeWorkoutRepository()
    user_repo = user_repo or FakeUserRepository()
    coach = coach or FakeCoachService()

    async def mock_user():
        return user_id

    app.dependency_overrides[deps.get_current_user] = mock_user
    app.dependency_overrides[deps.get_workout_repo] = lambda: workout_repo
    app.dependency_overrides[deps.get_user_repo] = lambda: user_repo
    app.dependency_overrides[deps.get_coach_service] = lambda: coach

    return {
        "workout_repo": workout_repo,
        "user_repo": user_repo,
        "coach": coach,
    }
