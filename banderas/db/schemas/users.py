from datetime import datetime

from pydantic import field_validator

from .common import CamelModel, PartialUpdate, ReadModel


class UserBase(CamelModel):
    email: str
    user_name: str
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None


class UserCreate(UserBase):
    # Identity provider subject; generated when absent.
    id: str | None = None


class UserUpdate(PartialUpdate):
    not_null = ("user_name", "config_step", "is_active")

    user_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    config_step: int | None = None
    is_active: bool | None = None


class User(UserBase, ReadModel):
    id: str
    config_step: int = 0
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @field_validator("config_step", mode="before")
    @classmethod
    def _parse_config_step(cls, value):
        if value is None or value == "":
            return 0
        return int(value)
