from datetime import datetime

from .common import CamelModel, PartialUpdate, ReadModel


class GalleryCategoryBase(CamelModel):
    name: str
    display_order: int = 0


class GalleryCategoryCreate(GalleryCategoryBase):
    # Derived from the name when omitted.
    slug: str | None = None


class GalleryCategoryUpdate(PartialUpdate):
    # A null or empty slug is regenerated from the name.
    not_null = ("name", "display_order")

    name: str | None = None
    slug: str | None = None
    display_order: int | None = None


class GalleryCategory(GalleryCategoryBase, ReadModel):
    id: str
    slug: str
    created_at: datetime


class GalleryItemBase(CamelModel):
    title: str
    description: str | None = None
    category_id: str | None = None
    year: str | None = None
    display_order: int = 0


class GalleryItemCreate(GalleryItemBase):
    image_url: str
    image_s3_key: str | None = None
    thumbnail_url: str | None = None
    thumbnail_s3_key: str | None = None


class GalleryItemUpdate(PartialUpdate):
    not_null = ("title", "image_url", "display_order")

    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    image_s3_key: str | None = None
    thumbnail_url: str | None = None
    thumbnail_s3_key: str | None = None
    category_id: str | None = None
    year: str | None = None
    display_order: int | None = None


class GalleryItem(GalleryItemBase, ReadModel):
    id: str
    image_url: str
    image_s3_key: str | None = None
    thumbnail_url: str | None = None
    thumbnail_s3_key: str | None = None
    created_at: datetime
    updated_at: datetime
