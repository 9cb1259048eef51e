"""
LiftMind API application factory.

``create_app()`` wires Sentry, CORS and the four routers (health, coach,
workouts, metrics) onto a fresh FastAPI instance. Tests build their own app
with explicit settings and override dependencies on it::

    app = create_app(settings=Settings(environment="test", _env_file=None))
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Local Next.js and Vite dev servers
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API; ``settings`` defaults to the cached environment settings."""
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="LiftMind API",
        description="AI strength coach: workout logging, PR tracking and progress metrics",
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _include_routers(app)
    _log_coach_config(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for liftmind-api")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    origins = list(DEFAULT_CORS_ORIGINS)
    origins.extend(o for o in settings.cors_origins_list if o not in origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    from api.routers import (
        health_router,
        coach_router,
        workouts_router,
        metrics_router,
    )

    app.include_router(health_router)
    app.include_router(coach_router)
    app.include_router(workouts_router)
    app.include_router(metrics_router)


def _log_coach_config(settings: Settings) -> None:
    if settings.coach_api_key:
        logger.info(f"AI coach enabled: model={settings.coach_model} base_url={settings.coach_base_url}")
    else:
        logger.warning("AI coach disabled: DEEPSEEK_API_KEY / OPENAI_API_KEY not set")


# uvicorn backend.main:app
app = create_app()
