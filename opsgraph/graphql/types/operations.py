"""
Employee, store, location and rank GraphQL type definitions
"""

from typing import Any

import strawberry

from opsgraph.schemas.employee import EmployeeStatus

Status = strawberry.enum(EmployeeStatus, name="Status", description="Employee availability status.")


@strawberry.type
class Employee:
    """Employee type for GraphQL API."""

    id: strawberry.ID
    first_name: str
    last_name: str
    status: Status | None
    stores: list[str]
    rank_id: str | None

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Employee":
        status = document.get("status")
        return cls(
            id=strawberry.ID(document["_id"]),
            first_name=document.get("first_name", ""),
            last_name=document.get("last_name", ""),
            status=EmployeeStatus(status) if status else None,
            stores=list(document.get("stores") or []),
            rank_id=document.get("rank_id"),
        )


@strawberry.type
class Store:
    """Store type for GraphQL API."""

    id: strawberry.ID
    name: str
    location_id: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Store":
        return cls(
            id=strawberry.ID(document["_id"]),
            name=document.get("name", ""),
            location_id=document.get("location_id", ""),
        )


@strawberry.type
class Location:
    """Location type for GraphQL API."""

    id: strawberry.ID
    country: str
    state: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Location":
        return cls(
            id=strawberry.ID(document["_id"]),
            country=document.get("country", ""),
            state=document.get("state", ""),
        )


@strawberry.type
class Rank:
    """Rank type for GraphQL API."""

    id: strawberry.ID
    name: str
    description: str

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Rank":
        return cls(
            id=strawberry.ID(document["_id"]),
            name=document.get("name", ""),
            description=document.get("description", ""),
        )
