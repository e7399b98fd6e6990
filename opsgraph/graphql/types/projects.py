"""
Owner and project GraphQL type definitions
"""

from typing import Any

import strawberry

from opsgraph.schemas.project import ProjectStatus as ProjectStatusEnum

ProjectStatus = strawberry.enum(ProjectStatusEnum, name="ProjectStatus")


@strawberry.type
class Owner:
    """Project owner type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    phone: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Owner":
        return cls(
            id=strawberry.ID(document["_id"]),
            name=document.get("name", ""),
            email=document.get("email", ""),
            phone=document.get("phone", ""),
        )


@strawberry.type
class Project:
    """Project type for GraphQL API."""

    id: strawberry.ID
    owner_id: str
    name: str
    description: str
    status: ProjectStatus

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Project":
        return cls(
            id=strawberry.ID(document["_id"]),
            owner_id=document.get("owner_id", ""),
            name=document.get("name", ""),
            description=document.get("description", ""),
            status=ProjectStatusEnum(document.get("status", ProjectStatusEnum.NOT_STARTED.value)),
        )
