"""Tests for AIClientFactory and AIRequestContext."""
import pytest

from backend.ai.client_factory import AIClientFactory, AIRequestContext
from backend.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep provider keys from the environment out of these tests."""
    for var in ("DEEPSEEK_API_KEY", "OPENAI_API_KEY", "COACH_BASE_URL"):
        monkeypatch.delenv(var, raising=False)


class TestAIRequestContext:
    """Tests for AIRequestContext dataclass."""

    def test_empty_context(self):
        assert AIRequestContext().to_headers() == {}

    def test_context_with_user_and_feature(self):
        headers = AIRequestContext(user_id="user123", feature_name="coach_chat").to_headers()
        assert headers == {"X-User-Id": "user123", "X-Feature": "coach_chat"}

    def test_header_values_are_sanitized(self):
        headers = AIRequestContext(user_id="user\r\nX-Evil: 1é").to_headers()
        assert headers["X-User-Id"] == "userX-Evil: 1"


class TestAIClientFactory:
    """Tests for AIClientFactory.create_coach_client."""

    def test_requires_api_key(self):
        settings = Settings(_env_file=None)
        with pytest.raises(ValueError, match="DEEPSEEK_API_KEY"):
            AIClientFactory.create_coach_client(settings)

    def test_creates_client_for_provider(self):
        settings = Settings(
            _env_file=None,
            deepseek_api_key="ds-key",
            coach_base_url="https://api.deepseek.com/v1",
        )
        client = AIClientFactory.create_coach_client(
            settings, AIRequestContext(user_id="user123")
        )
        assert client.api_key == "ds-key"
        assert str(client.base_url).startswith("https://api.deepseek.com/v1")
        assert client.max_retries == 0
        assert client.default_headers["X-User-Id"] == "user123"

    def test_openai_key_fallback(self):
        settings = Settings(_env_file=None, openai_api_key="oa-key")
        client = AIClientFactory.create_coach_client(settings)
        assert client.api_key == "oa-key"
