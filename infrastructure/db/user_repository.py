"""
Supabase implementation of UserRepository.

Reads and writes the ``users`` row: display name and the ``preferences``
JSON document.
"""
import logging
from typing import Optional, Dict, Any

from supabase import Client

from application.exceptions import StorageError

logger = logging.getLogger(__name__)

TABLE = "users"


class SupabaseUserRepository:
    """Supabase implementation of UserRepository protocol."""

    def __init__(self, client: Client):
        self._client = client

    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get id, name and preferences for a user, or None if absent."""
        try:
            result = (
                self._client.table(TABLE)
                .select("id, name, preferences")
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get user {user_id}: {e}")
            raise StorageError(str(e)) from e

        if not result.data:
            return None
        row = dict(result.data[0])
        row["preferences"] = row.get("preferences") or {}
        return row

    def update_preferences(
        self,
        user_id: str,
        preferences: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Replace the preferences document and return what was stored."""
        try:
            result = (
                self._client.table(TABLE)
                .update({"preferences": preferences})
                .eq("id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update preferences for {user_id}: {e}")
            raise StorageError(str(e)) from e

        if not result.data:
            logger.warning(f"Preferences update for {user_id} matched no user row")
            raise StorageError("User not found")

        logger.info(f"Preferences updated for user {user_id}")
        return result.data[0].get("preferences") or preferences
