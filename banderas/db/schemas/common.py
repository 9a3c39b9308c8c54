"""
Shared pydantic configuration for the JSON API.

Field names are snake_case in Python and camelCase on the wire; request
bodies are accepted in either form.
"""
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class ReadModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class PartialUpdate(CamelModel):
    """Partial update body. Fields listed in ``not_null`` may be omitted but not sent as null."""

    not_null: ClassVar[tuple[str, ...]] = ("display_order",)

    @model_validator(mode="after")
    def _reject_cleared_required_fields(self):
        cleared = [name for name in self.not_null if name in self.model_fields_set and getattr(self, name) is None]
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        return self

class ReorderItem(CamelModel):
    id: str
    display_order: int

class ReorderRequest(CamelModel):
    items: list[ReorderItem]

class SuccessResponse(BaseModel):
    success: bool = True
