"""
LiftMind runtime configuration.

Every knob the API reads from the environment (or a local ``.env``) is a
typed field on ``Settings``. Routers receive it through
``Depends(get_settings)``; everything else calls ``get_settings()`` directly::

    from backend.settings import get_settings

    settings = get_settings()
    client = OpenAI(api_key=settings.coach_api_key, base_url=settings.coach_base_url)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_ENVIRONMENTS = ("development", "staging", "production", "test")


class Settings(BaseSettings):
    """Environment-driven settings for the LiftMind API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment stage; one of development, staging, production, test",
    )

    # -------------------------------------------------------------------------
    # Storage (Supabase tables: workouts, users)
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(default=None, description="Supabase project URL")
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Service role key; bypasses row level security",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Anon key; fallback when no service role key is set",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------
    supabase_jwt_secret: Optional[str] = Field(
        default=None,
        description="HS256 secret that signs Supabase Auth access tokens",
    )
    supabase_jwt_audience: str = Field(
        default="authenticated",
        description="Required 'aud' claim on access tokens",
    )
    api_keys: str = Field(
        default="",
        description="Comma-separated service API keys accepted via X-API-Key",
    )

    @property
    def api_keys_list(self) -> list[str]:
        return [key.strip() for key in self.api_keys.split(",") if key.strip()]

    # -------------------------------------------------------------------------
    # AI Coach (any OpenAI-compatible chat completions endpoint)
    # -------------------------------------------------------------------------
    deepseek_api_key: Optional[str] = Field(default=None, description="DeepSeek API key")
    openai_api_key: Optional[str] = Field(
        default=None,
        description="Used only when DEEPSEEK_API_KEY is unset",
    )
    coach_base_url: str = Field(
        default="https://api.deepseek.com/v1",
        description="Chat completions base URL",
    )
    coach_model: str = Field(default="deepseek-chat", description="Coach chat model")
    coach_temperature: float = Field(default=0.7, ge=0, le=2)
    coach_max_tokens: int = Field(default=800, ge=1)
    coach_timeout_seconds: float = Field(default=60.0, gt=0)
    coach_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Tries per completion, counting the first; only transient errors retry",
    )
    coach_history_limit: int = Field(
        default=10,
        ge=0,
        description="Most recent conversation turns forwarded with each message",
    )

    @property
    def coach_api_key(self) -> Optional[str]:
        """DeepSeek key if present, else the OpenAI key."""
        return self.deepseek_api_key or self.openai_api_key

    # -------------------------------------------------------------------------
    # HTTP & error tracking
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default="",
        description="Comma-separated origins allowed in addition to the local web app",
    )
    sentry_dsn: Optional[str] = Field(default=None, description="Sentry DSN; unset disables Sentry")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        normalized = v.lower()
        if normalized not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"Unknown environment '{v}', expected one of {', '.join(VALID_ENVIRONMENTS)}"
            )
        return normalized

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Load settings once per process.

    Call ``get_settings.cache_clear()`` after changing the environment in tests.
    """
    return Settings()
