"""
API package for the LiftMind API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- schemas/: request and response models
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_workout_repo,
    get_user_repo,
    get_coach_service,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_workout_repo",
    "get_user_repo",
    # AI coach
    "get_coach_service",
    # Authentication
    "get_current_user",
]
