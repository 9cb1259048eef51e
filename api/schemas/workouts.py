"""
Workout Schemas for manual logging and history.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from domain.models import ExerciseEntry, WeightUnit, WorkoutRecord


class LogWorkoutRequest(BaseModel):
    """Request body for POST /workouts."""
    exercises: List[ExerciseEntry] = Field(..., min_length=1)
    session_rpe: Optional[float] = Field(default=None, ge=1, le=10)
    notes: Optional[str] = Field(default=None, max_length=2000)
    date: Optional[str] = Field(default=None, description="ISO date (YYYY-MM-DD)")
    unit: Optional[WeightUnit] = Field(
        default=None,
        description="Unit the weights are entered in; converted to the profile's unit",
    )


class LogWorkoutResponse(BaseModel):
    """Saved workout id and the metrics computed for it."""
    success: bool = True
    workout_id: str
    metrics: Dict[str, int]


class WorkoutListResponse(BaseModel):
    """Recent workouts, newest first."""
    workouts: List[WorkoutRecord] = []
    count: int = 0


class DeleteWorkoutResponse(BaseModel):
    success: bool = True
    workout_id: str


class MetricsResponse(BaseModel):
    """Dashboard or progress bundle for the user's training type."""
    training_type: str
    units: str
    workout_count: int
    metrics: Dict[str, Any]
