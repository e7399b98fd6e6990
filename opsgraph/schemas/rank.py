"""
Rank schema models for validation.
"""
from pydantic import BaseModel, field_validator

from opsgraph.schemas.common import require_text


class RankCreate(BaseModel):
    """Schema for creating ranks."""
    name: str
    description: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return require_text(v)
