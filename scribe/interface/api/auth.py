"""Bearer-token authentication for protected routes."""

from typing import Annotated

import logfire
from dishka.integrations.fastapi import FromDishka, inject
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from scribe.domain.service import JWTService

# auto_error=False so a missing header yields our 401 rather than FastAPI's 403
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def current_user_id(
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Resolve the caller's user ID from an ``Authorization: Bearer`` header.

    Runs as a route dependency, so an unauthenticated request is rejected
    before its form fields, body or uploads are looked at.

    Args:
        jwt_service: JWT service from DI
        credentials: Parsed bearer credentials, if the header was present

    Returns:
        User ID string from the token

    Raises:
        HTTPException: 401 when the token is missing, malformed, or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token",
        )

    user_id = jwt_service.get_user_id_from_token(credentials.credentials)
    if user_id is None:
        logfire.warn("Rejected bearer token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, token failed",
        )

    return str(user_id)


CurrentUserId = Annotated[str, Depends(current_user_id)]
