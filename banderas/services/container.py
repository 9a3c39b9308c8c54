"""
Service container assembled once at startup.

Route handlers reach services through ``app.state.container`` (see
``banderas.api.deps``); nothing here is a module-level singleton.
"""
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import sessionmaker

from banderas.db import repositories
from banderas.services.content_service import (
    HistoricalImageService,
    HistoryService,
    LeadershipService,
    ShieldService,
    ShieldValueService,
)
from banderas.services.email_service import EmailService
from banderas.services.gallery_category_service import GalleryCategoryService
from banderas.services.gallery_service import GalleryService
from banderas.services.identity_provider import IdentityProvider, identity_provider_from_env
from banderas.services.site_config_service import SiteConfigService
from banderas.services.storage import Storage, storage_from_env
from banderas.services.user_service import UserService


@dataclass
class ServiceContainer:
    shield_values: ShieldValueService
    history: HistoryService
    gallery_categories: GalleryCategoryService
    gallery: GalleryService
    leadership: LeadershipService
    shields: ShieldService
    historical_images: HistoricalImageService
    site_config: SiteConfigService
    users: UserService
    identity_provider: IdentityProvider
    storage: Storage


def build_container(
    session_factory: sessionmaker,
    identity_provider: Optional[IdentityProvider] = None,
    email_service=None,
    storage: Optional[Storage] = None,
) -> ServiceContainer:
    """Wire repositories and services; collaborators default to env configuration."""
    identity_provider = identity_provider or identity_provider_from_env()
    email_service = email_service or EmailService()
    storage = storage or storage_from_env()

    return ServiceContainer(
        shield_values=ShieldValueService(repositories.ShieldValueRepository(session_factory)),
        history=HistoryService(repositories.HistoryRepository(session_factory)),
        gallery_categories=GalleryCategoryService(repositories.GalleryCategoryRepository(session_factory)),
        gallery=GalleryService(repositories.GalleryItemRepository(session_factory), storage),
        leadership=LeadershipService(repositories.LeadershipRepository(session_factory), storage),
        shields=ShieldService(repositories.ShieldRepository(session_factory), storage),
        historical_images=HistoricalImageService(repositories.HistoricalImageRepository(session_factory), storage),
        site_config=SiteConfigService(repositories.SiteConfigRepository(session_factory), storage),
        users=UserService(repositories.UserRepository(session_factory), identity_provider, email_service),
        identity_provider=identity_provider,
        storage=storage,
    )
