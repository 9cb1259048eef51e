"""
Router package for the LiftMind API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- coach: AI coach chat, reply parsing and action confirmation
- workouts: Manual logging, history and deletion
- metrics: Dashboard and progress bundles
"""

from api.routers.health import router as health_router
from api.routers.coach import router as coach_router
from api.routers.workouts import router as workouts_router
from api.routers.metrics import router as metrics_router

__all__ = [
    "health_router",
    "coach_router",
    "workouts_router",
    "metrics_router",
]
