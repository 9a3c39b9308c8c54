"""
User repository.

Users are keyed by the identity provider subject; the email column is
unique and decides whether a user already exists.
"""
import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker

from banderas.db import models
from banderas.utils.redact import mask_email

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_user(self, user_id: str) -> Optional[models.User]:
        with self._session_factory() as db:
            return db.get(models.User, user_id)

    def get_user_by_email(self, email: str) -> Optional[models.User]:
        with self._session_factory() as db:
            return db.query(models.User).filter(models.User.email == email.lower()).first()

    def create_user(self, data: dict[str, Any]) -> models.User:
        """Insert a user unless one with the same email exists; return the stored row."""
        email = (data.get("email") or "").strip().lower()
        existing = self.get_user_by_email(email)
        if existing is not None:
            return existing

        values = dict(data)
        values["email"] = email
        if not values.get("id"):
            values["id"] = models.new_id()
        with self._session_factory() as db:
            user = models.User(**values)
            db.add(user)
            try:
                db.commit()
            except IntegrityError:
                # Lost a race with a concurrent insert for the same email.
                db.rollback()
                logger.info("User %s already created concurrently", mask_email(email))
                winner = db.query(models.User).filter(models.User.email == email).first()
                if winner is None:
                    raise
                return winner
            db.refresh(user)
            return user

    def update_user(self, user_id: str, data: dict[str, Any]) -> Optional[models.User]:
        with self._session_factory() as db:
            user = db.get(models.User, user_id)
            if user is None:
                return None
            for key, value in data.items():
                if key == "config_step" and value is not None:
                    value = str(value)
                setattr(user, key, value)
            db.commit()
            db.refresh(user)
            return user

    def sync_email(self, user_id: str, email: str) -> Optional[models.User]:
        """Point ``user_id`` at a new address; keep the old one if another row owns it."""
        email = email.strip().lower()
        with self._session_factory() as db:
            user = db.get(models.User, user_id)
            if user is None or user.email == email:
                return user
            user.email = email
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                logger.warning("Email %s already belongs to another user; keeping %s...", mask_email(email), user_id[:8])
                db.refresh(user)
                return user
            db.refresh(user)
            return user
