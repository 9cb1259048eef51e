"""
UpdateProfile Use Case.

Merges a partial profile patch into the preferences document stored on the
user row.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from application.exceptions import StorageError
from application.ports import UserRepository
from domain.models import ProfileUpdates

logger = logging.getLogger(__name__)

PROFILE_UPDATED_MESSAGE = "✅ Profile updated! Check your settings page to see the changes."


@dataclass
class UpdateProfileResult:
    """Result of the UpdateProfile use case execution."""

    success: bool
    preferences: Dict[str, Any] = field(default_factory=dict)
    message: Optional[str] = None
    error: Optional[str] = None


class UpdateProfileUseCase:
    """
    Apply a profile action to the stored preferences.

    Only non-empty fields of the patch are written; every other key already
    present in the preferences document is preserved.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: str, updates: ProfileUpdates) -> UpdateProfileResult:
        patch = updates.to_preferences_patch()
        try:
            user = self._user_repo.get_user(user_id) or {}
            current = dict(user.get("preferences") or {})
            if not patch:
                return UpdateProfileResult(
                    success=True, preferences=current, message=PROFILE_UPDATED_MESSAGE
                )

            merged = {**current, **patch}
            stored = self._user_repo.update_preferences(user_id, merged)
        except StorageError as e:
            logger.error(f"Profile update failed for {user_id}: {e}")
            return UpdateProfileResult(
                success=False, error=f"Failed to update profile: {e.message}"
            )

        logger.info(f"Updated preferences for {user_id}: {sorted(patch)}")
        return UpdateProfileResult(
            success=True, preferences=stored, message=PROFILE_UPDATED_MESSAGE
        )
