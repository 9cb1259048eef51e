"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "SUPABASE_JWT_SECRET",
    "API_KEYS",
    "DEEPSEEK_API_KEY",
    "OPENAI_API_KEY",
    "COACH_MODEL",
    "CORS_ALLOWED_ORIGINS",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        """Default environment should be development."""
        settings = Settings(_env_file=None)
        assert settings.environment == "development"
        assert settings.is_development is True

    def test_supabase_fields_default_to_none(self, clean_env):
        """Supabase fields should default to None."""
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_key is None
        assert settings.supabase_jwt_secret is None
        assert settings.supabase_jwt_audience == "authenticated"

    def test_coach_defaults(self, clean_env):
        """Coach defaults match the DeepSeek chat configuration."""
        settings = Settings(_env_file=None)
        assert settings.coach_model == "deepseek-chat"
        assert settings.coach_base_url == "https://api.deepseek.com/v1"
        assert settings.coach_temperature == 0.7
        assert settings.coach_max_tokens == 800
        assert settings.coach_history_limit == 10
        assert settings.coach_api_key is None

    def test_lists_empty_by_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.api_keys_list == []
        assert settings.cors_origins_list == []


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test that Settings reads environment variables."""

    def test_reads_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "PRODUCTION")
        monkeypatch.setenv("COACH_MODEL", "deepseek-reasoner")
        settings = Settings(_env_file=None)
        assert settings.environment == "production"
        assert settings.is_production is True
        assert settings.coach_model == "deepseek-reasoner"

    def test_invalid_environment(self, clean_env):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, environment="moon")

    def test_service_role_key_preferred(self, clean_env):
        settings = Settings(
            _env_file=None, supabase_service_role_key="service", supabase_anon_key="anon"
        )
        assert settings.supabase_key == "service"

    def test_anon_key_fallback(self, clean_env):
        assert Settings(_env_file=None, supabase_anon_key="anon").supabase_key == "anon"

    def test_deepseek_key_preferred(self, clean_env):
        settings = Settings(_env_file=None, deepseek_api_key="ds", openai_api_key="oa")
        assert settings.coach_api_key == "ds"

    def test_openai_key_fallback(self, clean_env):
        assert Settings(_env_file=None, openai_api_key="oa").coach_api_key == "oa"

    def test_comma_separated_lists(self, clean_env):
        settings = Settings(
            _env_file=None,
            api_keys=" sk_one, sk_two ,,",
            cors_allowed_origins="https://app.liftmind.io, https://staging.liftmind.io",
        )
        assert settings.api_keys_list == ["sk_one", "sk_two"]
        assert settings.cors_origins_list == [
            "https://app.liftmind.io",
            "https://staging.liftmind.io",
        ]


@pytest.mark.unit
class TestGetSettings:

    def test_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
