"""
Coach Service Interface (Port).

Defines the abstract interface for getting a reply from the AI coach.
Implementations may call any OpenAI-compatible chat completion endpoint.
"""

from typing import Any, Optional, Protocol, Sequence


class CoachService(Protocol):
    """Abstract interface for the language model behind the coach."""

    def complete(
        self,
        message: str,
        history: Optional[Sequence[Any]] = None,
        user_context: str = "",
        *,
        user_id: Optional[str] = None,
    ) -> str:
        """
        Get the coach's reply to a user message.

        Args:
            message: New user message
            history: Previous turns as role/content mappings, oldest first
            user_context: Athlete context appended to the system prompt
            user_id: Caller id, for request tracing

        Returns:
            Raw reply text, possibly ending with an ``ACTION: {...}`` line

        Raises:
            CoachServiceError: If no reply could be obtained
        """
        ...
