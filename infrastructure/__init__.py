"""
Infrastructure Layer for the LiftMind API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseWorkoutRepository,
    SupabaseUserRepository,
)

__all__ = [
    "SupabaseWorkoutRepository",
    "SupabaseUserRepository",
]
