from sqlalchemy import Boolean, Column, DateTime, String, Text

from .base import Base, now_utc


class User(Base):
    __tablename__ = 'users'
    # Same value as the identity provider subject ("sub" claim).
    id = Column(String(64), primary_key=True)
    email = Column(String, nullable=False, unique=True, index=True)
    user_name = Column(String, nullable=False)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    company = Column(String, nullable=True)
    # Onboarding progress counter, stored as text.
    config_step = Column(Text, nullable=False, default='0')
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)
