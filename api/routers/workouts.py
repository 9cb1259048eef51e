"""
Workouts router for manual logging and workout history.

This router contains endpoints for:
- POST /workouts - Log a workout entered by hand
- GET /workouts - List recent workouts
- DELETE /workouts/{workout_id} - Delete a workout

Workouts are immutable once saved; deleting is the only mutation.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import (
    get_current_user,
    get_log_workout_use_case,
    get_workout_repo,
)
from api.schemas.workouts import (
    DeleteWorkoutResponse,
    LogWorkoutRequest,
    LogWorkoutResponse,
    WorkoutListResponse,
)
from application.exceptions import StorageError
from application.ports import WorkoutRepository
from application.use_cases import LogWorkoutUseCase
from domain.converters import rows_to_workout_records
from domain.models import WorkoutAction

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workouts"],
)


# =============================================================================
# Workout Endpoints
# =============================================================================


@router.post("/workouts", response_model=LogWorkoutResponse, status_code=201)
def log_workout(
    request: LogWorkoutRequest,
    user_id: str = Depends(get_current_user),
    use_case: LogWorkoutUseCase = Depends(get_log_workout_use_case),
):
    """
    Log a workout manually.

    Entries are normalized and expanded into set records exactly like
    workouts logged through the coach.
    """
    action = WorkoutAction(
        exercises=request.exercises,
        session_rpe=request.session_rpe,
        notes=request.notes,
        date=request.date,
    )
    result = use_case.execute(user_id, action, unit=request.unit)

    if not result.success:
        if result.validation_errors:
            raise HTTPException(
                status_code=400,
                detail={"error": result.error, "validation_errors": result.validation_errors},
            )
        raise HTTPException(status_code=502, detail=result.error)

    return LogWorkoutResponse(
        workout_id=result.workout_id,
        metrics=result.metrics.to_dict(),
    )


@router.get("/workouts", response_model=WorkoutListResponse)
def list_workouts(
    limit: int = Query(50, ge=1, le=200, description="Maximum workouts to return"),
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """List the user's most recent workouts, newest first."""
    try:
        rows = workout_repo.list_recent(user_id, limit=limit)
    except StorageError as e:
        raise HTTPException(status_code=502, detail=f"Failed to load workouts: {e.message}")

    workouts = rows_to_workout_records(rows)
    return WorkoutListResponse(workouts=workouts, count=len(workouts))


@router.delete("/workouts/{workout_id}", response_model=DeleteWorkoutResponse)
def delete_workout(
    workout_id: str,
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Delete a workout owned by the current user."""
    try:
        deleted = workout_repo.delete(workout_id, user_id)
    except StorageError as e:
        raise HTTPException(status_code=502, detail=f"Failed to delete workout: {e.message}")

    if not deleted:
        raise HTTPException(status_code=404, detail="Workout not found")
    logger.info(f"Deleted workout {workout_id} for user {user_id}")
    return DeleteWorkoutResponse(workout_id=workout_id)
