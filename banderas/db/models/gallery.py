from sqlalchemy import Column, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship

from .base import Base, ReorderableMixin, TimestampedMixin


class GalleryCategory(ReorderableMixin, Base):
    __tablename__ = 'gallery_categories'
    name = Column(Text, nullable=False, unique=True)
    slug = Column(Text, nullable=False, unique=True)

    items = relationship(
        "GalleryItem",
        back_populates="category",
        cascade="all, delete-orphan",
    )


class GalleryItem(ReorderableMixin, TimestampedMixin, Base):
    __tablename__ = 'gallery_items'
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(Text, nullable=False)
    image_s3_key = Column(Text, nullable=True)
    thumbnail_url = Column(Text, nullable=True)
    thumbnail_s3_key = Column(Text, nullable=True)
    category_id = Column(String(36), ForeignKey('gallery_categories.id', ondelete='CASCADE'), nullable=True)
    year = Column(Text, nullable=True)

    category = relationship("GalleryCategory", back_populates="items")

    __table_args__ = (
        Index('idx_gallery_items_category_id', 'category_id'),
    )
