"""
Request authentication for the LiftMind API.

Athletes sign in against Supabase Auth from the web app, which then calls
this API with the Supabase access token. Internal tooling (imports, the
admin dashboard) uses a service API key instead.

Supabase tokens are HS256 JWTs signed with the project JWT secret; the
user id is the ``sub`` claim.
"""
import logging
from typing import Optional

import jwt
from fastapi import Header, HTTPException

from backend.settings import get_settings

logger = logging.getLogger(__name__)

SUPABASE_JWT_ALGORITHM = "HS256"
SERVICE_USER_ID = "admin"


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key")
) -> str:
    """
    FastAPI dependency returning the caller's user id.

    ``X-API-Key`` wins when both headers are present.
    """
    if x_api_key:
        return validate_api_key(x_api_key)
    if authorization:
        return validate_jwt(authorization)

    raise HTTPException(
        status_code=401,
        detail="Missing authentication. Provide Authorization header or X-API-Key."
    )


def validate_api_key(api_key: str) -> str:
    """
    Check a service API key.

    ``"<key>"`` authenticates as the service user; ``"<key>:<user_id>"``
    acts on behalf of that athlete.
    """
    valid_keys = get_settings().api_keys_list
    if not valid_keys:
        logger.warning("API key rejected: API_KEYS is empty")
        raise HTTPException(status_code=401, detail="API key authentication not configured")

    key, _, user_id = api_key.partition(":")
    if key not in valid_keys:
        raise HTTPException(status_code=401, detail="Invalid API key")

    return user_id or SERVICE_USER_ID


def validate_jwt(authorization: str) -> str:
    """Verify a ``Bearer`` Supabase access token and return its subject."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    settings = get_settings()
    if not settings.supabase_jwt_secret:
        raise HTTPException(
            status_code=500,
            detail="JWT validation not configured (missing SUPABASE_JWT_SECRET)"
        )

    token = authorization.split(" ", 1)[1]
    try:
        claims = jwt.decode(
            token,
            settings.supabase_jwt_secret,
            algorithms=[SUPABASE_JWT_ALGORITHM],
            audience=settings.supabase_jwt_audience,
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected Supabase access token: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    user_id = claims.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing user ID")
    return user_id
