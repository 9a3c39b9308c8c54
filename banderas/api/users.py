"""
User profile endpoints and the post-signup verification hook.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from banderas.api.auth import is_admin
from banderas.api.deps import get_container, get_current_user
from banderas.api.resources import service_errors
from banderas.db import models, schemas
from banderas.errors import UserNotFoundError, WelcomeEmailError
from banderas.services.container import ServiceContainer
from banderas.services.email_service import SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


def _ensure_self_or_admin(user_id: str, current_user: models.User) -> None:
    if current_user.id != user_id and not is_admin(current_user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


@router.get("/{user_id}/profile", response_model=schemas.User)
def get_user_profile(
    user_id: str,
    container: ServiceContainer = Depends(get_container),
    current_user: models.User = Depends(get_current_user),
):
    _ensure_self_or_admin(user_id, current_user)
    with service_errors("Internal server error"):
        user = container.users.get_user(user_id)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user


@router.put("/{user_id}/profile", response_model=schemas.User)
def update_user_profile(
    user_id: str,
    payload: schemas.UserUpdate,
    container: ServiceContainer = Depends(get_container),
    current_user: models.User = Depends(get_current_user),
):
    _ensure_self_or_admin(user_id, current_user)
    with service_errors("Failed to update user"):
        user = container.users.update_user(user_id, payload)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user


@router.post("/{user_id}/verify-email-complete")
def verify_email_complete(
    user_id: str,
    language: str = Query(default="es"),
    container: ServiceContainer = Depends(get_container),
):
    """Called by the frontend once Cognito confirms the email address."""
    if language not in SUPPORTED_LANGUAGES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Language must be 'es' or 'en'")
    try:
        result = container.users.verify_email_complete(user_id, language)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except WelcomeEmailError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process welcome materials",
        )
    except Exception:
        logger.exception("Email verification completion failed for user %s...", user_id[:8])
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")
    return {
        "success": True,
        "message": result["message"],
        "user": schemas.User.model_validate(result["user"]).model_dump(by_alias=True, mode="json"),
    }
