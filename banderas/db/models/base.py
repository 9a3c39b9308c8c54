"""
Shared SQLAlchemy base and column helpers.
"""
import uuid
from datetime import datetime, UTC

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base


def now_utc():
    """Return an aware UTC datetime for default/updated timestamps."""
    return datetime.now(UTC)


def new_id() -> str:
    return str(uuid.uuid4())


Base = declarative_base()


class ReorderableMixin:
    """Columns shared by every resource listed by ``display_order``."""

    id = Column(String(36), primary_key=True, default=new_id)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)


class TimestampedMixin:
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)
