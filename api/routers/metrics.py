"""
Metrics router for the dashboard and progress pages.

Both bundles adapt to the training type stored in the user's preferences.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import (
    get_current_user,
    get_dashboard_metrics_use_case,
    get_progress_metrics_use_case,
)
from api.schemas.workouts import MetricsResponse
from application.use_cases import (
    GetDashboardMetricsUseCase,
    GetMetricsResult,
    GetProgressMetricsUseCase,
)
from application.use_cases.get_metrics import DEFAULT_DASHBOARD_DAYS, DEFAULT_PROGRESS_DAYS

router = APIRouter(
    prefix="/metrics",
    tags=["Metrics"],
)


def _to_response(result: GetMetricsResult) -> MetricsResponse:
    if not result.success:
        raise HTTPException(status_code=502, detail=result.error)
    return MetricsResponse(
        training_type=result.training_type.value,
        units=result.units,
        workout_count=result.workout_count,
        metrics=result.metrics or {},
    )


@router.get("/dashboard", response_model=MetricsResponse)
def dashboard_metrics(
    days: int = Query(DEFAULT_DASHBOARD_DAYS, ge=1, le=365),
    user_id: str = Depends(get_current_user),
    use_case: GetDashboardMetricsUseCase = Depends(get_dashboard_metrics_use_case),
):
    """Headline metric, secondary tiles and highlights for the dashboard."""
    return _to_response(use_case.execute(user_id, days=days))


@router.get("/progress", response_model=MetricsResponse)
def progress_metrics(
    days: int = Query(DEFAULT_PROGRESS_DAYS, ge=1, le=730),
    user_id: str = Depends(get_current_user),
    use_case: GetProgressMetricsUseCase = Depends(get_progress_metrics_use_case),
):
    """Universal aggregates plus training-type charts for the progress page."""
    return _to_response(use_case.execute(user_id, days=days))
