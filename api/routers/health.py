"""
Liveness endpoint for load balancers and uptime checks.

``/health`` is the only unauthenticated route and touches neither
Supabase nor the coach model.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    return {"status": "ok"}
