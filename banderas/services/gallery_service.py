"""
Gallery items: photos stored through the storage backend, optionally
filed under a category.
"""
from typing import Any, Optional

from banderas.db.repositories import GalleryItemRepository
from banderas.errors import StorageError
from banderas.services.storage import Storage, is_image_type

from .content_service import INVALID_IMAGE_URL, ReorderableService, model_values

GALLERY_FOLDER = "gallery"


class GalleryService(ReorderableService):
    repository: GalleryItemRepository

    def __init__(self, repository: GalleryItemRepository, storage: Storage):
        super().__init__(repository)
        self.storage = storage

    def get_by_category(self, category_id: str):
        return self.repository.get_by_category(category_id)

    def get_uncategorized(self):
        return self.repository.get_uncategorized()

    def _store_image(self, data: bytes, content_type: str) -> tuple[str, str]:
        if not is_image_type(content_type):
            raise StorageError("Only image files are allowed")
        return self.storage.upload(data, content_type, GALLERY_FOLDER)

    def create_with_image(self, fields: dict[str, Any], image: bytes, content_type: str):
        url, key = self._store_image(image, content_type)
        values = {**fields, "image_url": url, "image_s3_key": key}
        try:
            return self.repository.create(values)
        except Exception:
            self.storage.delete_quietly(key)
            raise

    def create_with_url(self, data):
        values = model_values(data, partial=False)
        key = self.storage.key_from_url(values.get("image_url") or "")
        if key is None:
            raise StorageError(INVALID_IMAGE_URL)
        values["image_s3_key"] = key
        return self.repository.create(values)

    def update_with_image(
        self,
        item_id: str,
        fields: dict[str, Any],
        image: Optional[bytes] = None,
        content_type: Optional[str] = None,
    ):
        """Patch an item, replacing its stored image when one is supplied."""
        existing = self.repository.get_by_id(item_id)
        if existing is None:
            return None
        values = dict(fields)
        if image is not None:
            url, key = self._store_image(image, content_type or "")
            values.update(image_url=url, image_s3_key=key, thumbnail_url=None, thumbnail_s3_key=None)
        updated = self.repository.update(item_id, values)
        if image is not None:
            self.storage.delete_quietly(existing.image_s3_key)
            self.storage.delete_quietly(existing.thumbnail_s3_key)
        return updated

    def update_with_url(self, item_id: str, data):
        values = model_values(data, partial=True)
        old_key = None
        if values.get("image_url"):
            key = self.storage.key_from_url(values["image_url"])
            if key is None:
                raise StorageError(INVALID_IMAGE_URL)
            values["image_s3_key"] = key
            existing = self.repository.get_by_id(item_id)
            if existing is not None and existing.image_s3_key and existing.image_s3_key != key:
                old_key = existing.image_s3_key
        updated = self.repository.update(item_id, values)
        if updated is not None and old_key:
            self.storage.delete_quietly(old_key)
        return updated

    def delete(self, item_id: str) -> bool:
        existing = self.repository.get_by_id(item_id)
        if existing is None:
            return False
        deleted = self.repository.delete(item_id)
        if deleted:
            self.storage.delete_quietly(existing.image_s3_key)
            self.storage.delete_quietly(existing.thumbnail_s3_key)
        return deleted
