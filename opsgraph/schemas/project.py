"""
Project schema models for validation.
"""
from enum import Enum

from pydantic import BaseModel, field_validator

from opsgraph.schemas.common import require_text


class ProjectStatus(str, Enum):
    """Project progress status, stored by value."""
    NOT_STARTED = "NotStarted"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"


class ProjectCreate(BaseModel):
    """
    Schema for creating projects.

    owner_id is stored as given; it is not checked against the owner collection.
    """
    owner_id: str
    name: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.NOT_STARTED

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return require_text(v)
