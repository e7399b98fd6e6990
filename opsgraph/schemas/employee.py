"""
Employee schema models for validation.
"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, field_validator

from opsgraph.schemas.common import require_text


class EmployeeStatus(str, Enum):
    """Employee availability status, stored by value."""
    NONE = "None"
    WORKING = "Working"
    EMERGENCY_SERVICE = "EmergencyService"
    VACATION = "Vacation"
    ILLNESS = "Illness"


class EmployeeCreate(BaseModel):
    """Schema for creating employees."""
    first_name: str
    last_name: str
    status: Optional[EmployeeStatus] = None
    stores: Optional[List[str]] = None
    rank_id: str

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_names(cls, v):
        return require_text(v)


class EmployeeUpdate(BaseModel):
    """
    Schema for updating employees.

    Omitted status and stores are not "keep current": the update resets
    them to EmployeeStatus.NONE and an empty list.
    """
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    status: Optional[EmployeeStatus] = None
    stores: Optional[List[str]] = None
    rank_id: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_names(cls, v):
        return require_text(v)

    model_config = {
        "extra": "ignore"
    }
