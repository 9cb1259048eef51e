"""
Supabase implementation of WorkoutRepository.

This module provides the concrete Supabase implementation for workout
persistence against the ``workouts`` table. Database failures are logged and
re-raised as StorageError so that use cases can report them to the user.
"""
import logging
from datetime import date
from typing import Optional, List, Dict, Any

from supabase import Client

from application.exceptions import StorageError

logger = logging.getLogger(__name__)

TABLE = "workouts"


def _log_permission_hint(error_msg: str) -> None:
    if "PGRST" in error_msg or "permission" in error_msg.lower() or "row-level security" in error_msg.lower():
        logger.error("RLS/Permissions error: Consider using SUPABASE_SERVICE_ROLE_KEY instead of SUPABASE_ANON_KEY for backend API")


class SupabaseWorkoutRepository:
    """
    Supabase implementation of WorkoutRepository protocol.

    All Supabase query logic for workouts is encapsulated here.
    The client is injected via constructor for testability.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def insert(self, workout_data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a workout row and return it as stored."""
        try:
            result = self._client.table(TABLE).insert(workout_data).execute()
        except Exception as e:
            logger.error(f"Failed to save workout: {e}")
            _log_permission_hint(str(e))
            raise StorageError(str(e)) from e

        if not result.data:
            logger.error(f"Workout insert for {workout_data.get('user_id')} returned no row")
            raise StorageError("Workout was not stored")

        logger.info(f"Workout saved for user {workout_data.get('user_id')}")
        return result.data[0]

    def get(
        self,
        workout_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """Get a single workout by ID."""
        try:
            result = (
                self._client.table(TABLE)
                .select("*")
                .eq("id", workout_id)
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get workout {workout_id}: {e}")
            raise StorageError(str(e)) from e
        return result.data[0] if result.data else None

    def list_recent(
        self,
        user_id: str,
        *,
        limit: int = 50,
    ) -> List[Dict[str, Any]]:
        """Get the most recent workouts for a user, newest first."""
        try:
            result = (
                self._client.table(TABLE)
                .select("*")
                .eq("user_id", user_id)
                .order("date", desc=True)
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get workouts for {user_id}: {e}")
            raise StorageError(str(e)) from e
        return result.data if result.data else []

    def list_since(
        self,
        user_id: str,
        since: date,
        *,
        limit: int = 500,
    ) -> List[Dict[str, Any]]:
        """Get a user's workouts dated on or after ``since``, newest first."""
        try:
            result = (
                self._client.table(TABLE)
                .select("*")
                .eq("user_id", user_id)
                .gte("date", since.isoformat())
                .order("date", desc=True)
                .limit(limit)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get workouts since {since} for {user_id}: {e}")
            raise StorageError(str(e)) from e
        return result.data if result.data else []

    def delete(
        self,
        workout_id: str,
        user_id: str,
    ) -> bool:
        """Delete a workout."""
        try:
            logger.info(f"Attempting to delete workout {workout_id} for user {user_id}")
            result = (
                self._client.table(TABLE)
                .delete()
                .eq("id", workout_id)
                .eq("user_id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to delete workout {workout_id}: {e}")
            raise StorageError(str(e)) from e

        deleted_count = len(result.data) if result.data else 0
        if deleted_count > 0:
            logger.info(f"Workout {workout_id} deleted successfully ({deleted_count} row(s))")
            return True
        logger.warning(f"No workout found with id {workout_id} for user {user_id} (0 rows deleted)")
        return False
