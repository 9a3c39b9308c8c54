from datetime import datetime

from .common import CamelModel, ReadModel


class SiteConfigUpdate(CamelModel):
    """Partial site settings; only the fields sent are written."""

    site_name: str | None = None
    site_subtitle: str | None = None
    hero_description: str | None = None
    logo_url: str | None = None
    logo_s3_key: str | None = None
    favicon_url: str | None = None
    favicon_s3_key: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    training_schedule: str | None = None
    training_location: str | None = None
    ceremonies_schedule: str | None = None
    ceremonies_notes: str | None = None
    meetings_schedule: str | None = None
    meetings_location: str | None = None
    admission_requirements: list[str] | None = None
    footer_description: str | None = None
    mission_statement: str | None = None
    leadership_title: str | None = None
    leadership_description: str | None = None
    leadership_image_url: str | None = None
    leadership_image_s3_key: str | None = None
    founding_year: int | None = None


class SiteConfig(SiteConfigUpdate, ReadModel):
    id: str
    site_name: str
    site_subtitle: str
    founding_year: int
    updated_at: datetime
