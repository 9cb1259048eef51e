"""
Unit tests for SavePersonalRecordUseCase.
"""

import pytest

from application.use_cases import SavePersonalRecordUseCase
from application.use_cases.save_personal_record import pr_message, pr_note
from domain.models import PRAction
from tests.fakes import create_workout_repo, lift, workout_row


@pytest.fixture
def workout_repo():
    return create_workout_repo([
        workout_row("2024-01-10", lift("Squat", (3, 95), (1, 100)), user_id="user-1"),
        workout_row("2024-01-03", lift("Bench Press", (5, 80)), user_id="user-1"),
        workout_row("2024-01-02", lift("Squat", (1, 300)), user_id="someone-else"),
    ])


@pytest.fixture
def use_case(workout_repo):
    return SavePersonalRecordUseCase(workout_repo=workout_repo)


@pytest.mark.unit
class TestSavePersonalRecord:

    def test_new_pr(self, use_case):
        result = use_case.execute("user-1", PRAction(exercise="Squat", weight=102.5, unit="kg"))

        assert result.success is True
        assert result.is_new_pr is True
        assert result.previous_best == 100
        assert result.message == "🎉 New PR! Squat 102.5kg! Previous: 100kg 🏆"

    def test_not_a_pr_is_still_saved(self, use_case, workout_repo):
        result = use_case.execute("user-1", PRAction(exercise="Squat", weight=100))

        assert result.success is True
        assert result.is_new_pr is False
        assert result.message.startswith("PR logged")
        assert len(workout_repo.list_recent("user-1")) == 3

    def test_saved_as_single_rep_rpe_ten(self, use_case, workout_repo):
        result = use_case.execute("user-1", PRAction(exercise="Deadlift", weight=200, unit="kg"))

        stored = workout_repo.get(result.workout_id, "user-1")
        assert stored["lifts"] == [{
            "exercise": "Deadlift",
            "sets": [{"reps": 1, "weight": 200.0, "rpe": 10.0, "completed": True}],
        }]
        assert stored["session_rpe"] == 10
        assert stored["notes"] == "🏆 New PR: Deadlift 200kg"

    def test_first_pr_has_no_previous(self, use_case):
        result = use_case.execute("user-1", PRAction(exercise="Deadlift", weight=200))
        assert result.previous_best == 0
        assert "Previous" not in result.message

    def test_estimate_used_as_previous_best(self, use_case):
        # 80 x 5 -> Epley 93
        result = use_case.execute("user-1", PRAction(exercise="Bench Press", weight=95))
        assert result.previous_best == 93
        assert result.is_new_pr is True

    def test_other_users_history_is_ignored(self, use_case):
        result = use_case.execute("user-1", PRAction(exercise="Squat", weight=150))
        assert result.previous_best == 100

    def test_history_read_failure_writes_nothing(self, use_case, workout_repo):
        workout_repo.fail_with("timeout")

        result = use_case.execute("user-1", PRAction(exercise="Squat", weight=150))

        assert result.success is False
        assert result.error == "Failed to save PR: timeout"


@pytest.mark.unit
class TestPRMessages:

    def test_note_defaults_unit(self):
        assert pr_note(PRAction(exercise="Squat", weight=140)) == "🏆 New PR: Squat 140kg"

    def test_message_uses_lbs(self):
        action = PRAction(exercise="Bench Press", weight=225, unit="lbs")
        assert pr_message(action, True, 0) == "🎉 New PR! Bench Press 225lbs! 🏆"
