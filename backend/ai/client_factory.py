"""Factory for the OpenAI-compatible client used by the coach."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx
import openai

from backend.settings import Settings, get_settings


logger = logging.getLogger(__name__)

# Default client timeout
DEFAULT_TIMEOUT = 60.0


def _sanitize_header_value(value: str) -> str:
    """Keep only printable ASCII so a value cannot break the header block."""
    return "".join(char for char in value if char.isprintable() and ord(char) < 128)


@dataclass
class AIRequestContext:
    """Context attached to coach requests for tracing on the provider side."""

    user_id: Optional[str] = None
    feature_name: Optional[str] = None

    def to_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self.user_id:
            headers["X-User-Id"] = _sanitize_header_value(self.user_id)
        if self.feature_name:
            headers["X-Feature"] = _sanitize_header_value(self.feature_name)
        return headers


class AIClientFactory:
    """Creates OpenAI SDK clients pointed at the configured coach provider."""

    @staticmethod
    def create_coach_client(
        settings: Optional[Settings] = None,
        context: Optional[AIRequestContext] = None,
    ) -> openai.OpenAI:
        """
        Create an OpenAI client for the coach model (DeepSeek by default).

        Args:
            settings: Settings to read credentials from (defaults to get_settings())
            context: Request context whose headers are sent with every call

        Returns:
            OpenAI client instance

        Raises:
            ValueError: If the coach API key is not configured
        """
        settings = settings or get_settings()
        if not settings.coach_api_key:
            raise ValueError(
                "Coach API key not configured. Set DEEPSEEK_API_KEY environment variable."
            )

        timeout = settings.coach_timeout_seconds or DEFAULT_TIMEOUT
        http_client = httpx.Client(
            timeout=timeout,
            limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
        )

        logger.debug(f"Creating coach client for {settings.coach_base_url}")
        return openai.OpenAI(
            api_key=settings.coach_api_key,
            base_url=settings.coach_base_url,
            timeout=timeout,
            # Retries are handled by backend.ai.retry
            max_retries=0,
            default_headers=context.to_headers() if context else None,
            http_client=http_client,
        )
