from sqlalchemy import Boolean, Column, Text

from .base import Base, ReorderableMixin, TimestampedMixin


class ShieldValue(ReorderableMixin, TimestampedMixin, Base):
    __tablename__ = 'shield_values'
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    icon_name = Column(Text, nullable=False, default='Award')


class HistoricalMilestone(ReorderableMixin, TimestampedMixin, Base):
    __tablename__ = 'historical_milestones'
    # Free text: "1951", "Década de 1970".
    year = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    icon_name = Column(Text, nullable=False, default='Flag')


class LeadershipPeriod(ReorderableMixin, TimestampedMixin, Base):
    __tablename__ = 'leadership_periods'
    year = Column(Text, nullable=False)
    jefatura = Column(Text, nullable=False)
    segunda_voz = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    image_s3_key = Column(Text, nullable=True)


class Shield(ReorderableMixin, TimestampedMixin, Base):
    __tablename__ = 'shields'
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    image_s3_key = Column(Text, nullable=True)
    symbolism = Column(Text, nullable=True)
    is_main_shield = Column(Boolean, nullable=False, default=False)


class HistoricalImage(ReorderableMixin, TimestampedMixin, Base):
    __tablename__ = 'historical_images'
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    image_s3_key = Column(Text, nullable=True)
