"""
Repository classes, one per entity, built once at startup with the
session factory.
"""

from .base import ReorderableRepository
from .content import (
    HistoricalImageRepository,
    HistoryRepository,
    LeadershipRepository,
    ShieldRepository,
    ShieldValueRepository,
)
from .gallery import GalleryCategoryRepository, GalleryItemRepository
from .site_config import SiteConfigRepository
from .users import UserRepository

__all__ = [
    "ReorderableRepository",
    "HistoricalImageRepository",
    "HistoryRepository",
    "LeadershipRepository",
    "ShieldRepository",
    "ShieldValueRepository",
    "GalleryCategoryRepository",
    "GalleryItemRepository",
    "SiteConfigRepository",
    "UserRepository",
]
