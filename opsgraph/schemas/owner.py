"""
Owner schema models for validation.
"""
from pydantic import BaseModel, field_validator

from opsgraph.schemas.common import require_text


class OwnerCreate(BaseModel):
    """Schema for creating project owners."""
    name: str
    email: str
    phone: str

    @field_validator("name", "email")
    @classmethod
    def validate_fields(cls, v):
        return require_text(v)

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Ana Popescu",
                "email": "ana@example.com",
                "phone": "555-123-4567"
            }
        }
    }
