"""
SQLAlchemy models for the site content store.

Re-exports `Base`, `now_utc` and every ORM class so callers can import
from `banderas.db.models` directly.
"""

from .base import Base, new_id, now_utc  # re-export

from .users import User
from .site_config import SiteConfig, DEFAULT_ADMISSION_REQUIREMENTS
from .content import ShieldValue, HistoricalMilestone, LeadershipPeriod, Shield, HistoricalImage
from .gallery import GalleryCategory, GalleryItem

__all__ = [
    "Base",
    "new_id",
    "now_utc",
    "User",
    "SiteConfig",
    "DEFAULT_ADMISSION_REQUIREMENTS",
    "ShieldValue",
    "HistoricalMilestone",
    "LeadershipPeriod",
    "Shield",
    "HistoricalImage",
    "GalleryCategory",
    "GalleryItem",
]
