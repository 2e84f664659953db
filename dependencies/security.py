import hmac
import logging
from typing import Optional, Annotated

from fastapi import Header, HTTPException

from config.settings import settings

logger = logging.getLogger(__name__)

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


def require_api_token(authorization: AuthHeader = None):
    """Write endpoints (grading, courses, exams) need ``Authorization: Bearer <API_INTERNAL_TOKEN>``."""
    expected = settings.API_INTERNAL_TOKEN
    if not expected:
        logger.error("API_INTERNAL_TOKEN is not set, write endpoints are disabled")
        raise HTTPException(status_code=500, detail="Server token not configured")

    if not authorization:
        raise _unauthorized("Missing Authorization header")

    scheme, _, token = authorization.partition(" ")
    if not token:
        raise _unauthorized("Invalid Authorization header format")
    if scheme.lower() != "bearer":
        raise _unauthorized("Invalid auth scheme")

    # constant-time comparison
    if not hmac.compare_digest(token.strip().encode(), expected.encode()):
        logger.warning("Rejected write request with an invalid token")
        raise _unauthorized("Invalid token")

    return {"client": "internal"}
