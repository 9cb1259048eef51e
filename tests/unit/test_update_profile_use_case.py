"""
Unit tests for UpdateProfileUseCase.
"""

import pytest

from application.use_cases import UpdateProfileUseCase
from domain.models import ProfileUpdates
from tests.fakes import create_user_repo


@pytest.fixture
def user_repo():
    return create_user_repo(
        user_id="user-1",
        preferences={"trainingType": "powerlifting", "units": "kg", "theme": "dark"},
    )


@pytest.mark.unit
class TestUpdateProfile:

    def test_patch_preserves_other_keys(self, user_repo):
        result = UpdateProfileUseCase(user_repo).execute(
            "user-1", ProfileUpdates(goal="Total 500", experience="advanced")
        )

        assert result.success is True
        assert result.preferences == {
            "trainingType": "powerlifting",
            "units": "kg",
            "theme": "dark",
            "goal": "Total 500",
            "experience": "advanced",
        }

    def test_empty_patch_does_not_write(self, user_repo):
        result = UpdateProfileUseCase(user_repo).execute("user-1", ProfileUpdates())

        assert result.success is True
        assert result.preferences["trainingType"] == "powerlifting"
        assert user_repo.update_calls == []

    def test_storage_failure(self, user_repo):
        user_repo.fail_with("permission denied")

        result = UpdateProfileUseCase(user_repo).execute("user-1", ProfileUpdates(goal="Cut"))

        assert result.success is False
        assert result.error == "Failed to update profile: permission denied"
