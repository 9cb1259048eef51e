"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import patch

from backend.main import create_app, _init_sentry, _configure_cors, _log_coach_config
from backend.settings import Settings


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        """create_app() should return a FastAPI application instance."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        """create_app() should use get_settings() when no settings provided."""
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_settings = Settings(environment="test", _env_file=None)
            mock_get_settings.return_value = mock_settings

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        """create_app() should configure app title and version."""
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)

        assert app.title == "LiftMind API"
        assert app.version == "1.0.0"

    def test_create_app_registers_routes(self):
        """All domain routers should be mounted."""
        app = create_app(settings=Settings(environment="test", _env_file=None))
        paths = {route.path for route in app.routes}

        assert {
            "/health",
            "/coach/chat",
            "/coach/parse",
            "/coach/actions",
            "/workouts",
            "/workouts/{workout_id}",
            "/metrics/dashboard",
            "/metrics/progress",
        } <= paths


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        """Sentry should not be initialized when DSN is not set."""
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        """Sentry should be initialized when DSN is provided."""
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
            )


@pytest.mark.unit
class TestConfigureCors:
    """Test CORS configuration."""

    def test_configure_cors_adds_middleware(self):
        """_configure_cors should add CORS middleware to the app."""
        app = FastAPI()
        initial_middleware_count = len(app.user_middleware)

        _configure_cors(app, Settings(_env_file=None))

        assert len(app.user_middleware) == initial_middleware_count + 1

    def test_extra_origins_from_settings(self):
        settings = Settings(
            environment="test",
            cors_allowed_origins="https://app.liftmind.io",
            _env_file=None,
        )
        client = TestClient(create_app(settings=settings))

        response = client.get("/health", headers={"Origin": "https://app.liftmind.io"})

        assert response.headers["access-control-allow-origin"] == "https://app.liftmind.io"

    def test_unknown_origin_not_allowed(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))
        response = client.get("/health", headers={"Origin": "https://evil.example"})
        assert "access-control-allow-origin" not in response.headers


@pytest.mark.unit
class TestLogCoachConfig:
    """Test coach configuration logging."""

    def test_logs_enabled(self, caplog):
        settings = Settings(deepseek_api_key="ds-key", _env_file=None)

        with caplog.at_level("INFO"):
            _log_coach_config(settings)

        assert "AI coach enabled: model=deepseek-chat" in caplog.text

    def test_logs_disabled(self, caplog, monkeypatch):
        for var in ("DEEPSEEK_API_KEY", "OPENAI_API_KEY"):
            monkeypatch.delenv(var, raising=False)

        with caplog.at_level("WARNING"):
            _log_coach_config(Settings(_env_file=None))

        assert "AI coach disabled" in caplog.text


@pytest.mark.integration
class TestAppIntegration:
    """Integration tests for the created app."""

    def test_health(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_cors_allows_local_frontend(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))
        response = client.get("/health", headers={"Origin": "http://localhost:3000"})

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers

    def test_protected_route_requires_auth(self):
        client = TestClient(create_app(settings=Settings(environment="test", _env_file=None)))
        response = client.get("/workouts")
        assert response.status_code == 401
