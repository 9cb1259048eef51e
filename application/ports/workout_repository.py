"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence operations.
Implementations may use Supabase, in-memory storage, or other backends.
"""
from datetime import date
from typing import Protocol, Optional, List, Dict, Any


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    Workout rows are append-only: they are inserted once and can only be
    deleted as a whole. Implementations raise
    application.exceptions.StorageError when the backing store fails; a
    missing row is not an error.
    """

    def insert(self, workout_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new workout row.

        Args:
            workout_data: Row payload (user_id, date, lifts, notes, session_rpe
                and the four derived aggregates)

        Returns:
            The stored row including its generated id and created_at

        Raises:
            StorageError: If the insert fails
        """
        ...

    def get(
        self,
        workout_id: str,
        user_id: str,
    ) -> Optional[Dict[str, Any]]:
        """
        Get a single workout by ID.

        Args:
            workout_id: Workout UUID
            user_id: Owner id (for authorization)

        Returns:
            Workout row or None if not found/unauthorized
        """
        ...

    def list_recent(
        self,
        user_id: str,
        *,
        limit: int = 50,
    ) -> List[Dict[str, Any]]:
        """
        Get the most recent workouts for a user.

        Args:
            user_id: Owner id
            limit: Maximum number of workouts to return

        Returns:
            Workout rows ordered by date desc
        """
        ...

    def list_since(
        self,
        user_id: str,
        since: date,
        *,
        limit: int = 500,
    ) -> List[Dict[str, Any]]:
        """
        Get a user's workouts on or after a given day.

        Args:
            user_id: Owner id
            since: First day included in the window
            limit: Upper bound on rows returned

        Returns:
            Workout rows ordered by date desc
        """
        ...

    def delete(
        self,
        workout_id: str,
        user_id: str,
    ) -> bool:
        """
        Delete a workout.

        Args:
            workout_id: Workout UUID
            user_id: Owner id (for authorization)

        Returns:
            True if deleted, False if not found or unauthorized
        """
        ...
