"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- coach: coach chat, reply parsing and action confirmation
- workouts: manual logging, history and metrics bundles
"""

from api.schemas.coach import (
    ChatTurn,
    ChatRequest,
    ChatResponse,
    ParseRequest,
    ConfirmActionRequest,
    ConfirmActionResponse,
)
from api.schemas.workouts import (
    LogWorkoutRequest,
    LogWorkoutResponse,
    WorkoutListResponse,
    DeleteWorkoutResponse,
    MetricsResponse,
)

__all__ = [
    "ChatTurn",
    "ChatRequest",
    "ChatResponse",
    "ParseRequest",
    "ConfirmActionRequest",
    "ConfirmActionResponse",
    "LogWorkoutRequest",
    "LogWorkoutResponse",
    "WorkoutListResponse",
    "DeleteWorkoutResponse",
    "MetricsResponse",
]
