"""
Pydantic schemas for the JSON API, split per domain.
"""

from .common import CamelModel, ReorderItem, ReorderRequest, SuccessResponse
from .content import (
    ShieldValue, ShieldValueCreate, ShieldValueUpdate,
    HistoricalMilestone, HistoricalMilestoneCreate, HistoricalMilestoneUpdate,
    LeadershipPeriod, LeadershipPeriodCreate, LeadershipPeriodUpdate,
    Shield, ShieldCreate, ShieldUpdate,
    HistoricalImage, HistoricalImageCreate, HistoricalImageUpdate,
)
from .gallery import (
    GalleryCategory, GalleryCategoryCreate, GalleryCategoryUpdate,
    GalleryItem, GalleryItemCreate, GalleryItemUpdate,
)
from .site_config import SiteConfig, SiteConfigUpdate
from .users import User, UserCreate, UserUpdate
