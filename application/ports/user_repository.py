"""
User Repository Interface (Port).

Access to the ``users`` row: display name and the preferences JSON document.
"""
from typing import Protocol, Optional, Dict, Any


class UserRepository(Protocol):
    """Abstract interface for user profile persistence."""

    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a user row.

        Args:
            user_id: User id

        Returns:
            Row with at least ``id``, ``name`` and ``preferences``, or None

        Raises:
            StorageError: If the read fails
        """
        ...

    def update_preferences(
        self,
        user_id: str,
        preferences: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Replace the stored preferences document.

        Callers merge partial updates before calling this.

        Args:
            user_id: User id
            preferences: Full preferences document to store

        Returns:
            The stored preferences document

        Raises:
            StorageError: If the write fails
        """
        ...
