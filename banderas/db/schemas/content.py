from datetime import datetime

from .common import CamelModel, PartialUpdate, ReadModel


# Shield values

class ShieldValueBase(CamelModel):
    title: str
    description: str
    icon_name: str = 'Award'
    display_order: int = 0


class ShieldValueCreate(ShieldValueBase):
    pass


class ShieldValueUpdate(PartialUpdate):
    not_null = ("title", "description", "icon_name", "display_order")

    title: str | None = None
    description: str | None = None
    icon_name: str | None = None
    display_order: int | None = None


class ShieldValue(ShieldValueBase, ReadModel):
    id: str
    created_at: datetime
    updated_at: datetime


# Historical milestones

class HistoricalMilestoneBase(CamelModel):
    year: str
    title: str
    description: str
    icon_name: str = 'Flag'
    display_order: int = 0


class HistoricalMilestoneCreate(HistoricalMilestoneBase):
    pass


class HistoricalMilestoneUpdate(PartialUpdate):
    not_null = ("year", "title", "description", "icon_name", "display_order")

    year: str | None = None
    title: str | None = None
    description: str | None = None
    icon_name: str | None = None
    display_order: int | None = None


class HistoricalMilestone(HistoricalMilestoneBase, ReadModel):
    id: str
    created_at: datetime
    updated_at: datetime


# Leadership periods (jefaturas)

class LeadershipPeriodBase(CamelModel):
    year: str
    jefatura: str
    segunda_voz: str | None = None
    image_url: str | None = None
    image_s3_key: str | None = None
    display_order: int = 0


class LeadershipPeriodCreate(LeadershipPeriodBase):
    pass


class LeadershipPeriodUpdate(PartialUpdate):
    not_null = ("year", "jefatura", "display_order")

    year: str | None = None
    jefatura: str | None = None
    segunda_voz: str | None = None
    image_url: str | None = None
    image_s3_key: str | None = None
    display_order: int | None = None


class LeadershipPeriod(LeadershipPeriodBase, ReadModel):
    id: str
    created_at: datetime
    updated_at: datetime


# Shields (escudos)

class ShieldBase(CamelModel):
    title: str
    description: str
    image_url: str
    image_s3_key: str | None = None
    symbolism: str | None = None
    is_main_shield: bool = False
    display_order: int = 0


class ShieldCreate(ShieldBase):
    pass


class ShieldUpdate(PartialUpdate):
    not_null = ("title", "description", "image_url", "is_main_shield", "display_order")

    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    image_s3_key: str | None = None
    symbolism: str | None = None
    is_main_shield: bool | None = None
    display_order: int | None = None


class Shield(ShieldBase, ReadModel):
    id: str
    created_at: datetime
    updated_at: datetime


# Historical images

class HistoricalImageBase(CamelModel):
    title: str
    description: str
    image_url: str
    image_s3_key: str | None = None
    display_order: int = 0


class HistoricalImageCreate(HistoricalImageBase):
    pass


class HistoricalImageUpdate(PartialUpdate):
    not_null = ("title", "description", "image_url", "display_order")

    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    image_s3_key: str | None = None
    display_order: int | None = None


class HistoricalImage(HistoricalImageBase, ReadModel):
    id: str
    created_at: datetime
    updated_at: datetime
