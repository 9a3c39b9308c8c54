"""
API dependency helpers.

Hands route handlers the service container built at startup and the
authenticated user for mutating endpoints.
"""
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from banderas.api.auth import is_admin, resolve_user
from banderas.db import models
from banderas.errors import IdentityProviderError
from banderas.services.container import ServiceContainer

logger = logging.getLogger(__name__)


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_current_user(
    container: ServiceContainer = Depends(get_container),
    authorization: Optional[str] = Header(default=None),
) -> models.User:
    try:
        user = resolve_user(container, authorization)
    except IdentityProviderError:
        logger.exception("Identity provider unavailable during authentication")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to authenticate")
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Authentication required")
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account disabled")
    return user


def require_admin(user: models.User = Depends(get_current_user)) -> models.User:
    if not is_admin(user):
        logger.warning("User %s... is not an admin", user.id[:8])
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user
