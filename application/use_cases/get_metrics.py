"""
Metrics query use cases.

Both queries read the user's training type and preferred unit from the
stored preferences, fetch the workouts in the requested window and hand them
to the pure metric engines in backend.core.
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from application.exceptions import StorageError
from application.ports import UserRepository, WorkoutRepository
from backend.core.dashboard_metrics import PREVIOUS_WINDOW_DAYS, calculate_dashboard_metrics
from backend.core.progress_metrics import calculate_progress_metrics
from domain.converters import rows_to_workout_records
from domain.models import TrainingType, UserPreferences, WorkoutRecord

logger = logging.getLogger(__name__)

DEFAULT_DASHBOARD_DAYS = 30
DEFAULT_PROGRESS_DAYS = 90


@dataclass
class GetMetricsResult:
    """Result of a metrics query."""

    success: bool
    training_type: TrainingType = TrainingType.GENERAL_STRENGTH
    units: str = "kg"
    workout_count: int = 0
    metrics: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


class _MetricsQuery:
    """Shared preference and window loading for the metrics queries."""

    def __init__(
        self,
        workout_repo: WorkoutRepository,
        user_repo: UserRepository,
    ) -> None:
        self._workout_repo = workout_repo
        self._user_repo = user_repo

    def _load_preferences(self, user_id: str) -> UserPreferences:
        user = self._user_repo.get_user(user_id) or {}
        try:
            return UserPreferences.model_validate(user.get("preferences") or {})
        except ValidationError as e:
            logger.warning(f"Invalid preferences for {user_id}, using defaults: {e}")
            return UserPreferences()

    def _load_window(self, user_id: str, days: int, today: date) -> List[WorkoutRecord]:
        rows = self._workout_repo.list_since(user_id, today - timedelta(days=days))
        return rows_to_workout_records(rows)


class GetDashboardMetricsUseCase(_MetricsQuery):
    """
    Dashboard bundle for the training type selected in the user's profile.

    Powerlifting always reads at least 60 days so that the PR progress delta
    has an older window to compare against.
    """

    def execute(
        self,
        user_id: str,
        *,
        days: int = DEFAULT_DASHBOARD_DAYS,
        today: Optional[date] = None,
    ) -> GetMetricsResult:
        today = today or date.today()
        try:
            preferences = self._load_preferences(user_id)
            window = days
            if preferences.training_type == TrainingType.POWERLIFTING:
                window = max(days, PREVIOUS_WINDOW_DAYS)
            workouts = self._load_window(user_id, window, today)
        except StorageError as e:
            logger.error(f"Dashboard metrics failed for {user_id}: {e}")
            return GetMetricsResult(success=False, error=f"Failed to load metrics: {e.message}")

        metrics = calculate_dashboard_metrics(
            workouts, preferences.training_type, preferences.units, today=today
        )
        return GetMetricsResult(
            success=True,
            training_type=preferences.training_type,
            units=preferences.units,
            workout_count=len(workouts),
            metrics=metrics.to_dict(),
        )


class GetProgressMetricsUseCase(_MetricsQuery):
    """Progress page bundle: universal aggregates plus type-specific charts."""

    def execute(
        self,
        user_id: str,
        *,
        days: int = DEFAULT_PROGRESS_DAYS,
        today: Optional[date] = None,
    ) -> GetMetricsResult:
        today = today or date.today()
        try:
            preferences = self._load_preferences(user_id)
            workouts = self._load_window(user_id, days, today)
        except StorageError as e:
            logger.error(f"Progress metrics failed for {user_id}: {e}")
            return GetMetricsResult(success=False, error=f"Failed to load metrics: {e.message}")

        metrics = calculate_progress_metrics(
            workouts, preferences.training_type, preferences.units, today=today
        )
        return GetMetricsResult(
            success=True,
            training_type=preferences.training_type,
            units=preferences.units,
            workout_count=len(workouts),
            metrics=metrics.to_dict(),
        )
