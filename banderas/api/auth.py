"""
Authentication helpers and identity resolution.

Resolves the Cognito bearer token (or the development identity) to a
local user and applies the ADMIN_EMAILS allowlist.
"""
import logging
from typing import Optional

from banderas.db import models
from banderas.services.container import ServiceContainer
from banderas.services.identity_provider import IdentityClaims
from banderas.utils.runtime import DEV_USER_EMAIL, DEV_USER_ID, dev_mode_active, env_list

logger = logging.getLogger(__name__)

DEV_CLAIMS = IdentityClaims(
    sub=DEV_USER_ID,
    email=DEV_USER_EMAIL,
    username="dev",
    first_name="Development",
    last_name="User",
)


def _normalize_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    return email.strip().lower()


def _admin_emails() -> set:
    return env_list("ADMIN_EMAILS")


def is_admin(user: models.User) -> bool:
    """Every signed-in user is an admin unless ADMIN_EMAILS narrows the set."""
    if user.id == DEV_USER_ID:
        return True
    admins = _admin_emails()
    if not admins:
        return True
    return _normalize_email(user.email) in admins


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def resolve_user(container: ServiceContainer, authorization: Optional[str]) -> Optional[models.User]:
    """Return the local user behind the request credentials, or None."""
    if dev_mode_active():
        return container.users.ensure_user(DEV_CLAIMS)

    token = bearer_token(authorization)
    if not token:
        return None
    claims = container.identity_provider.verify_access_token(token)
    if claims is None:
        logger.info("Rejected bearer token")
        return None
    return container.users.ensure_user(claims)
