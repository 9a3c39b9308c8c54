from typing import Any

from banderas.db.repositories import GalleryCategoryRepository
from banderas.utils.slugs import generate_slug

from .content_service import ReorderableService


class GalleryCategoryService(ReorderableService):
    """Gallery categories; the slug follows the name unless given explicitly."""

    repository: GalleryCategoryRepository

    def __init__(self, repository: GalleryCategoryRepository):
        super().__init__(repository)

    def get_by_slug(self, slug: str):
        return self.repository.get_by_slug(slug)

    def _prepare_create(self, values: dict[str, Any]) -> dict[str, Any]:
        if not values.get("slug"):
            values["slug"] = generate_slug(values["name"])
        return values

    def _prepare_update(self, item_id: str, values: dict[str, Any]) -> dict[str, Any]:
        if not values.get("slug"):
            values.pop("slug", None)
            if values.get("name"):
                values["slug"] = generate_slug(values["name"])
        return values
