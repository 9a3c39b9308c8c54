"""
Services for the reorderable content resources.

``ReorderableService`` carries the CRUD and reorder behaviour shared by
every resource; subclasses add the per-resource rules (main shield
exclusivity, stored image validation and cleanup).
"""
import logging
from typing import Any, Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel

from banderas.db.repositories import (
    HistoricalImageRepository,
    LeadershipRepository,
    ReorderableRepository,
    ShieldRepository,
)
from banderas.db.schemas import ReorderItem
from banderas.errors import StorageError
from banderas.services.storage import Storage

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

INVALID_IMAGE_URL = "Invalid image URL - must be a valid HTTPS URL from the configured storage"


def model_values(data: Any, *, partial: bool) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=partial)
    return dict(data)


class ReorderableService(Generic[ModelT]):
    def __init__(self, repository: ReorderableRepository):
        self.repository = repository

    def get_all(self) -> list[ModelT]:
        return self.repository.get_all()

    def get_by_id(self, item_id: str) -> Optional[ModelT]:
        return self.repository.get_by_id(item_id)

    def create(self, data) -> ModelT:
        return self.repository.create(self._prepare_create(model_values(data, partial=False)))

    def update(self, item_id: str, data) -> Optional[ModelT]:
        return self.repository.update(item_id, self._prepare_update(item_id, model_values(data, partial=True)))

    def delete(self, item_id: str) -> bool:
        return self.repository.delete(item_id)

    def reorder(self, items: Iterable[ReorderItem]) -> None:
        pairs = [(item.id, item.display_order) for item in items]
        self.repository.update_display_order(pairs)
        logger.info("Reordered %d %s rows", len(pairs), self.repository.model.__tablename__)

    def _prepare_create(self, values: dict[str, Any]) -> dict[str, Any]:
        return values

    def _prepare_update(self, item_id: str, values: dict[str, Any]) -> dict[str, Any]:
        return values


class StoredImageMixin:
    """Validates ``image_url`` against storage and fills ``image_s3_key``."""

    storage: Storage

    def _check_image(self, values: dict[str, Any]) -> dict[str, Any]:
        url = values.get("image_url")
        if not url:
            return values
        key = self.storage.key_from_url(url)
        if key is None:
            raise StorageError(INVALID_IMAGE_URL)
        if not values.get("image_s3_key"):
            values["image_s3_key"] = key
        return values


class ShieldValueService(ReorderableService):
    """Values shown on the shields page ("Honor", "Disciplina", ...)."""


class HistoryService(ReorderableService):
    """Historical milestones for the timeline."""


class LeadershipService(StoredImageMixin, ReorderableService):
    def __init__(self, repository: LeadershipRepository, storage: Storage):
        super().__init__(repository)
        self.storage = storage

    def _prepare_create(self, values):
        return self._check_image(values)

    def _prepare_update(self, item_id, values):
        return self._check_image(values)


class ShieldService(StoredImageMixin, ReorderableService):
    repository: ShieldRepository

    def __init__(self, repository: ShieldRepository, storage: Storage):
        super().__init__(repository)
        self.storage = storage

    def get_main(self):
        return self.repository.get_main()

    def set_main(self, shield_id: str):
        return self.repository.set_main(shield_id)

    def _prepare_create(self, values):
        values = self._check_image(values)
        if values.get("is_main_shield"):
            self.repository.clear_main()
        return values

    def _prepare_update(self, item_id, values):
        values = self._check_image(values)
        if values.get("is_main_shield"):
            # Skip the clear when the target row is missing so a 404 leaves others untouched.
            if self.repository.get_by_id(item_id) is not None:
                self.repository.clear_main()
        return values


class HistoricalImageService(ReorderableService):
    def __init__(self, repository: HistoricalImageRepository, storage: Storage):
        super().__init__(repository)
        self.storage = storage

    def update(self, item_id: str, data):
        values = model_values(data, partial=True)
        existing = self.repository.get_by_id(item_id)
        if existing is None:
            return None
        updated = self.repository.update(item_id, values)
        old_key = existing.image_s3_key
        if updated is not None and "image_s3_key" in values and old_key and old_key != values["image_s3_key"]:
            self.storage.delete_quietly(old_key)
        return updated

    def delete(self, item_id: str) -> bool:
        existing = self.repository.get_by_id(item_id)
        if existing is None:
            return False
        deleted = self.repository.delete(item_id)
        if deleted:
            self.storage.delete_quietly(existing.image_s3_key)
        return deleted
