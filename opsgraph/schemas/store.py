"""
Store schema models for validation.
"""
from pydantic import BaseModel, field_validator

from opsgraph.schemas.common import require_text


class StoreCreate(BaseModel):
    """Schema for creating stores."""
    name: str
    location_id: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return require_text(v)
