from typing import Optional

from banderas.db import models

from .base import ReorderableRepository


class GalleryCategoryRepository(ReorderableRepository[models.GalleryCategory]):
    model = models.GalleryCategory

    def get_by_slug(self, slug: str) -> Optional[models.GalleryCategory]:
        with self._session() as db:
            return db.query(models.GalleryCategory).filter(models.GalleryCategory.slug == slug).first()


class GalleryItemRepository(ReorderableRepository[models.GalleryItem]):
    model = models.GalleryItem

    def get_by_category(self, category_id: str) -> list[models.GalleryItem]:
        with self._session() as db:
            return (
                db.query(models.GalleryItem)
                .filter(models.GalleryItem.category_id == category_id)
                .order_by(models.GalleryItem.display_order.asc())
                .all()
            )

    def get_uncategorized(self) -> list[models.GalleryItem]:
        with self._session() as db:
            return (
                db.query(models.GalleryItem)
                .filter(models.GalleryItem.category_id.is_(None))
                .order_by(models.GalleryItem.display_order.asc())
                .all()
            )
