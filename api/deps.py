"""
Dependency providers wiring the LiftMind routers to their collaborators.

Routers only ever see the Protocols from ``application.ports`` and the use
cases built on them. The Supabase client and settings are process-wide
singletons; repositories, the coach client and use cases are cheap and are
built per request.

Tests swap the storage and model layers out through FastAPI overrides::

    app.dependency_overrides[get_workout_repo] = lambda: FakeWorkoutRepository()
    app.dependency_overrides[get_coach_service] = lambda: FakeCoachService(reply)
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

from application.ports import CoachService, UserRepository, WorkoutRepository
from application.use_cases import (
    CoachChatUseCase,
    ConfirmActionUseCase,
    GetDashboardMetricsUseCase,
    GetProgressMetricsUseCase,
    LogWorkoutUseCase,
)
from infrastructure import SupabaseUserRepository, SupabaseWorkoutRepository
from backend.ai.coach_client import CoachClient
from backend.auth import get_current_user as _authenticate
from backend.settings import Settings, get_settings as _load_settings


# =============================================================================
# Settings & Storage
# =============================================================================


def get_settings() -> Settings:
    """Settings for the running process (cached in backend.settings)."""
    return _load_settings()


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Build the shared Supabase client.

    Returns None when the project URL or key is missing so that routes
    without storage (``/health``) still work in a bare environment.
    """
    settings = _load_settings()
    if not (settings.supabase_url and settings.supabase_key):
        return None
    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """Supabase client for routes that cannot run without storage (503 otherwise)."""
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Workout storage is unavailable: Supabase is not configured.",
        )
    return client


def get_workout_repo(
    client: Client = Depends(get_supabase_client_required),
) -> WorkoutRepository:
    return SupabaseWorkoutRepository(client)


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    return SupabaseUserRepository(client)


# =============================================================================
# AI Coach
# =============================================================================


def get_coach_service(settings: Settings = Depends(get_settings)) -> CoachService:
    """
    Chat completion client behind ``/coach/chat``.

    The OpenAI client is created on first completion, so parsing and
    confirming actions never require a model API key.
    """
    return CoachClient(settings=settings)


# =============================================================================
# Use Cases
# =============================================================================


def get_confirm_action_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    user_repo: UserRepository = Depends(get_user_repo),
) -> ConfirmActionUseCase:
    return ConfirmActionUseCase(workout_repo=workout_repo, user_repo=user_repo)


def get_log_workout_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    user_repo: UserRepository = Depends(get_user_repo),
) -> LogWorkoutUseCase:
    return LogWorkoutUseCase(workout_repo=workout_repo, user_repo=user_repo)


def get_coach_chat_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    user_repo: UserRepository = Depends(get_user_repo),
    coach: CoachService = Depends(get_coach_service),
) -> CoachChatUseCase:
    return CoachChatUseCase(workout_repo=workout_repo, user_repo=user_repo, coach=coach)


def get_dashboard_metrics_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    user_repo: UserRepository = Depends(get_user_repo),
) -> GetDashboardMetricsUseCase:
    return GetDashboardMetricsUseCase(workout_repo=workout_repo, user_repo=user_repo)


def get_progress_metrics_use_case(
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
    user_repo: UserRepository = Depends(get_user_repo),
) -> GetProgressMetricsUseCase:
    return GetProgressMetricsUseCase(workout_repo=workout_repo, user_repo=user_repo)


# =============================================================================
# Authentication
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Resolve the calling athlete's user id.

    Accepts either a Supabase access token (``Authorization: Bearer``) or an
    ``X-API-Key`` header; see backend.auth for the accepted formats. Raises
    a 401 HTTPException when neither authenticates.
    """
    return await _authenticate(authorization=authorization, x_api_key=x_api_key)


__all__ = [
    "get_settings",
    "get_supabase_client",
    "get_supabase_client_required",
    "get_workout_repo",
    "get_user_repo",
    "get_coach_service",
    "get_confirm_action_use_case",
    "get_log_workout_use_case",
    "get_coach_chat_use_case",
    "get_dashboard_metrics_use_case",
    "get_progress_metrics_use_case",
    "get_current_user",
]
