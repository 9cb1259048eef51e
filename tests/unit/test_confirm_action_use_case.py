"""
Unit tests for ConfirmActionUseCase.

Tests for:
- Dispatch by action type (workout, pr, profile)
- Chat actions rejected
- Failure results passed through from the underlying workflows
"""

import pytest

from application.exceptions import ActionNotSupportedError
from application.use_cases import ConfirmActionResult, ConfirmActionUseCase
from application.use_cases.confirm_action import WORKOUT_LOGGED_MESSAGE
from application.use_cases.update_profile import PROFILE_UPDATED_MESSAGE
from domain.models import (
    ChatAction,
    ExerciseEntry,
    PRAction,
    ProfileAction,
    ProfileUpdates,
    WorkoutAction,
)
from tests.fakes import create_user_repo, create_workout_repo, lift, workout_row


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def workout_repo():
    return create_workout_repo([
        workout_row("2024-01-10", lift("Squat", (1, 130)), user_id="user-1"),
    ])


@pytest.fixture
def user_repo():
    return create_user_repo(user_id="user-1", preferences={"units": "kg", "goal": "Get strong"})


@pytest.fixture
def use_case(workout_repo, user_repo):
    return ConfirmActionUseCase(workout_repo=workout_repo, user_repo=user_repo)


# =============================================================================
# Dispatch Tests
# =============================================================================


@pytest.mark.unit
class TestConfirmAction:

    def test_workout(self, use_case, workout_repo):
        action = WorkoutAction(
            exercises=[ExerciseEntry(exercise="bp", sets=5, reps=5, weight=100)],
        )

        result = use_case.execute("user-1", action)

        assert isinstance(result, ConfirmActionResult)
        assert result.success is True
        assert result.action_type == "workout"
        assert result.message == WORKOUT_LOGGED_MESSAGE
        stored = workout_repo.get(result.workout_id, "user-1")
        # Edited client payloads are canonicalized again before saving
        assert stored["lifts"][0]["exercise"] == "Bench Press"
        assert stored["session_rpe"] == 7

    def test_pr(self, use_case):
        result = use_case.execute("user-1", PRAction(exercise="squat", weight=140))

        assert result.success is True
        assert result.action_type == "pr"
        assert result.is_new_pr is True
        assert result.previous_best == 130
        assert result.workout_id

    def test_profile_merges_preferences(self, use_case, user_repo):
        action = ProfileAction(updates=ProfileUpdates(focus_area="legs", units="lbs"))

        result = use_case.execute("user-1", action)

        assert result.success is True
        assert result.message == PROFILE_UPDATED_MESSAGE
        assert result.preferences == {"units": "lbs", "goal": "Get strong", "focusArea": "legs"}
        assert user_repo.get_user("user-1")["preferences"]["focusArea"] == "legs"

    def test_chat_is_rejected(self, use_case):
        with pytest.raises(ActionNotSupportedError):
            use_case.execute("user-1", ChatAction())


# =============================================================================
# Failure Tests
# =============================================================================


@pytest.mark.unit
class TestConfirmActionFailures:

    def test_invalid_workout_carries_validation_errors(self, use_case):
        result = use_case.execute("user-1", WorkoutAction(exercises=[]))

        assert result.success is False
        assert result.message is None
        assert result.validation_errors

    def test_pr_storage_failure(self, use_case, workout_repo):
        workout_repo.fail_with("offline")

        result = use_case.execute("user-1", PRAction(exercise="Squat", weight=140))

        assert result.success is False
        assert result.is_new_pr is None
        assert result.error == "Failed to save PR: offline"

    def test_profile_for_unknown_user(self, workout_repo):
        use_case = ConfirmActionUseCase(workout_repo, create_user_repo(user_id="other"))

        result = use_case.execute("user-1", ProfileAction(updates=ProfileUpdates(goal="Cut")))

        assert result.success is False
        assert result.preferences is None
        assert result.error == "Failed to update profile: User not found"
