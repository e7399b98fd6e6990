"""
Location schema models for validation.
"""
from pydantic import BaseModel, field_validator

from opsgraph.schemas.common import require_text


class LocationCreate(BaseModel):
    """Schema for creating locations."""
    country: str
    state: str

    @field_validator("country", "state")
    @classmethod
    def validate_fields(cls, v):
        return require_text(v)
