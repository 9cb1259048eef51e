"""
Chat completion client for the AI coach.

Sends the system prompt, a sanitized slice of the conversation and the new
user message to an OpenAI-compatible endpoint and returns the raw reply text.
Parsing the reply is the job of backend.core.action_parser.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence

import openai

from backend.ai.client_factory import AIClientFactory, AIRequestContext
from backend.ai.coach_prompt import build_system_prompt
from backend.ai.retry import create_retry_decorator
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

ALLOWED_ROLES = ("system", "user", "assistant")


class CoachServiceError(Exception):
    """Raised when the coach model cannot produce a usable reply."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def sanitize_history(history: Optional[Sequence[Any]], limit: int) -> List[Dict[str, str]]:
    """
    Keep only well-formed turns and the most recent ``limit`` of them.

    A turn is kept when it has a known role and string content. Accepts
    dicts or objects exposing ``role`` / ``content`` attributes.
    """
    cleaned: List[Dict[str, str]] = []
    for turn in history or []:
        if isinstance(turn, dict):
            role, content = turn.get("role"), turn.get("content")
        else:
            role, content = getattr(turn, "role", None), getattr(turn, "content", None)
        if role in ALLOWED_ROLES and isinstance(content, str):
            cleaned.append({"role": role, "content": content})
    if limit <= 0:
        return []
    return cleaned[-limit:]


class CoachClient:
    """
    Thin wrapper around the chat completions API.

    Usage:
        >>> client = CoachClient()
        >>> reply = client.complete("Just did 5x5 bench at 100kg", history=[])
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[openai.OpenAI] = None,
    ):
        """
        Args:
            settings: Settings (defaults to get_settings())
            client: Pre-built OpenAI client, mainly for tests
        """
        self._settings = settings or get_settings()
        self._client = client
        self._retry = create_retry_decorator(max_attempts=self._settings.coach_max_attempts)

    def _get_client(self, user_id: Optional[str]) -> openai.OpenAI:
        if self._client is None:
            context = AIRequestContext(user_id=user_id, feature_name="coach_chat")
            try:
                self._client = AIClientFactory.create_coach_client(self._settings, context)
            except ValueError as e:
                logger.error(f"Coach client not configured: {e}")
                raise CoachServiceError("AI service not configured") from e
        return self._client

    def build_messages(
        self,
        message: str,
        history: Optional[Sequence[Any]] = None,
        user_context: str = "",
    ) -> List[Dict[str, str]]:
        """Assemble system prompt, trimmed history and the new user turn."""
        return [
            {"role": "system", "content": build_system_prompt(user_context)},
            *sanitize_history(history, self._settings.coach_history_limit),
            {"role": "user", "content": message},
        ]

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
            history: Previous turns (role/content), oldest first
            user_context: Athlete context block for the system prompt
            user_id: Caller id, forwarded for request tracing

        Returns:
            Raw reply text, including its ACTION line

        Raises:
            CoachServiceError: If the provider fails after retries or returns no text
        """
        client = self._get_client(user_id)
        messages = self.build_messages(message, history, user_context)

        @self._retry
        def _call():
            return client.chat.completions.create(
                model=self._settings.coach_model,
                messages=messages,
                temperature=self._settings.coach_temperature,
                max_tokens=self._settings.coach_max_tokens,
            )

        try:
            response = _call()
        except openai.APIStatusError as e:
            logger.error(f"Coach API error {e.status_code}: {e}")
            raise CoachServiceError("AI service error. Please try again.", e.status_code) from e
        except openai.OpenAIError as e:
            logger.error(f"Coach API request failed: {e}")
            raise CoachServiceError("AI service error. Please try again.") from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError):
            content = None

        if not isinstance(content, str):
            logger.error("Unexpected coach response payload without text content")
            raise CoachServiceError("Invalid response from AI service")

        return content
