"""
Site settings: a single row created on the first write.
"""
import logging
from typing import Any, Optional

from banderas.db import models
from banderas.db.repositories import SiteConfigRepository
from banderas.errors import BanderasError, StorageError
from banderas.services.storage import Storage, is_image_type

from .content_service import model_values

logger = logging.getLogger(__name__)

# Columns that cannot be cleared; a null in the payload leaves them unchanged.
_REQUIRED_FIELDS = ("site_name", "site_subtitle", "founding_year")

# Upload field name -> (url column, key column, storage folder)
UPLOAD_FIELDS = {
    "logo": ("logo_url", "logo_s3_key", "site/logo"),
    "favicon": ("favicon_url", "favicon_s3_key", "site/favicon"),
}


class SiteConfigService:
    def __init__(self, repository: SiteConfigRepository, storage: Storage):
        self.repository = repository
        self.storage = storage

    def get_config(self) -> Optional[models.SiteConfig]:
        return self.repository.get_config()

    def update_config(self, data) -> models.SiteConfig:
        """Apply a partial update, creating the row when none exists yet."""
        values = model_values(data, partial=True)
        for name in _REQUIRED_FIELDS:
            if name in values and values[name] is None:
                values.pop(name)

        existing = self.repository.get_config()
        if existing is None:
            logger.info("Creating site configuration")
            return self.repository.create_config(values)

        updated = self.repository.update_config(existing.id, values)
        if updated is None:
            raise BanderasError("Failed to update site configuration")
        return updated

    def update_config_with_files(self, data, files: dict[str, tuple[bytes, str]]) -> models.SiteConfig:
        """Store uploaded logo/favicon files, then apply the update.

        ``files`` maps ``logo``/``favicon`` to ``(content, content_type)``.
        Replaced files are removed once the row points at the new ones.
        """
        values: dict[str, Any] = model_values(data, partial=True)
        for name, (content, content_type) in files.items():
            if name not in UPLOAD_FIELDS:
                continue
            if not is_image_type(content_type):
                raise StorageError("Only image files are allowed")

        existing = self.repository.get_config()
        stale_keys = []
        new_keys = []
        try:
            for name, (content, content_type) in files.items():
                if name not in UPLOAD_FIELDS:
                    continue
                url_field, key_field, folder = UPLOAD_FIELDS[name]
                url, key = self.storage.upload(content, content_type, folder)
                new_keys.append(key)
                values[url_field] = url
                values[key_field] = key
                if existing is not None and getattr(existing, key_field):
                    stale_keys.append(getattr(existing, key_field))

            config = self.update_config(values)
        except Exception:
            for key in new_keys:
                self.storage.delete_quietly(key)
            raise
        for key in stale_keys:
            self.storage.delete_quietly(key)
        return config
