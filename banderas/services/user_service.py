"""
User service.

Local user rows mirror identity provider accounts. A user missing locally
is materialized from the provider's claims on first lookup; profile edits
are written locally first and then mirrored back to the provider.
"""
import logging
from typing import Optional

from banderas.db import models
from banderas.db.repositories import UserRepository
from banderas.db.schemas import UserCreate, UserUpdate
from banderas.errors import UserNotFoundError, WelcomeEmailError
from banderas.services.identity_provider import IdentityClaims, IdentityProvider

from .content_service import model_values

logger = logging.getLogger(__name__)

# Local field -> identity provider attribute
MIRRORED_ATTRIBUTES = {
    "first_name": "given_name",
    "last_name": "family_name",
    "company": "custom:company_name",
}


class UserService:
    def __init__(self, repository: UserRepository, identity_provider: IdentityProvider, email_service):
        self.repository = repository
        self.identity_provider = identity_provider
        self.email_service = email_service

    def get_user(self, user_id: str) -> Optional[models.User]:
        user = self.repository.get_user(user_id)
        if user is not None:
            return user

        claims = self.identity_provider.get_user(user_id)
        if claims is None:
            return None
        logger.info("User %s... not found locally, syncing from identity provider", user_id[:8])
        return self.ensure_user(claims)

    def get_user_by_email(self, email: str) -> Optional[models.User]:
        return self.repository.get_user_by_email(email)

    def create_user(self, data) -> models.User:
        """Create a user, or return the existing one with the same email."""
        values = model_values(data, partial=False)
        return self.repository.create_user(values)

    def ensure_user(self, claims: IdentityClaims) -> models.User:
        """Local row for verified claims, matched by subject first, then by email."""
        user = self.repository.get_user(claims.sub)
        if user is not None:
            if claims.email and user.email != claims.email.lower():
                logger.info("Email changed in identity provider for user %s..., syncing", claims.sub[:8])
                user = self.repository.sync_email(user.id, claims.email)
            return user
        return self.create_user(
            UserCreate(
                id=claims.sub,
                email=claims.email,
                user_name=claims.username or claims.email,
                first_name=claims.first_name,
                last_name=claims.last_name,
                company=claims.company,
            )
        )

    def update_user(self, user_id: str, data: UserUpdate) -> Optional[models.User]:
        values = model_values(data, partial=True)
        user = self.repository.update_user(user_id, values)
        if user is None:
            return None

        attributes = {
            attribute: values[field]
            for field, attribute in MIRRORED_ATTRIBUTES.items()
            if values.get(field)
        }
        if attributes:
            try:
                self.identity_provider.update_user_attributes(user_id, attributes)
            except Exception:
                # The local row stays updated; the provider catches up on the next edit.
                logger.exception("Failed to mirror profile of user %s... to identity provider", user_id[:8])
        return user

    def verify_email_complete(self, user_id: str, language: str = "es") -> dict:
        """Make sure the verified user exists locally and send the welcome email."""
        logger.info("Processing email verification completion for user %s...", user_id[:8])
        user = self.get_user(user_id)
        if user is None:
            raise UserNotFoundError("User not found in identity provider")

        try:
            self.email_service.send_welcome_email(user.email, user.first_name, user.last_name, language)
        except Exception as e:
            logger.exception("Failed to send welcome email to user %s...", user_id[:8])
            if isinstance(e, WelcomeEmailError):
                raise
            raise WelcomeEmailError("Failed to process welcome materials") from e
        logger.info("Welcome email processed for user %s... (%s)", user_id[:8], language)
        return {"user": user, "message": "Welcome materials processed successfully"}
