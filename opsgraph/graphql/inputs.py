"""
GraphQL input type definitions
"""

import strawberry

from .types.operations import Status
from .types.projects import ProjectStatus


@strawberry.input
class FetchInput:
    """Identifies a single document by its id."""

    id: str


@strawberry.input
class CreateEmployeeInput:
    """Input for creating a new employee."""

    first_name: str
    last_name: str
    rank_id: str
    status: Status | None = None
    stores: list[str] | None = None


@strawberry.input
class UpdateEmployeeInput:
    """Input for updating an employee. Omitted status and stores are cleared."""

    id: str
    first_name: str | None = None
    last_name: str | None = None
    status: Status | None = None
    stores: list[str] | None = None
    rank_id: str | None = None


@strawberry.input
class DeleteEmployeeInput:
    """Input for deleting an employee."""

    id: str


@strawberry.input
class CreateStoreInput:
    name: str
    location_id: str = ""


@strawberry.input
class CreateLocationInput:
    country: str
    state: str


@strawberry.input
class CreateRankInput:
    name: str
    description: str = ""


@strawberry.input
class CreateOwnerInput:
    name: str
    email: str
    phone: str


@strawberry.input
class CreateProjectInput:
    """Input for creating a new project."""

    owner_id: str
    name: str
    description: str = ""
    status: ProjectStatus = ProjectStatus.NOT_STARTED
