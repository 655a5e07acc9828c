"""Bearer-token authentication for the webhook API."""
import logging
import secrets

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings, get_settings


logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def verify_api_key(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Require the configured API key as a bearer token.

    When no API key is configured (local development), every request is allowed.
    """
    if not settings.auth_enabled:
        return
    if credentials is None or not secrets.compare_digest(
        credentials.credentials.encode(), settings.api_key.encode(),
    ):
        logger.warning("auth_failed", extra={"has_credentials": credentials is not None})
        raise HTTPException(
            status_code=401,
            detail="Invalid or missing API key",
            headers={"WWW-Authenticate": "Bearer"},
        )
