"""
Owner and project resolvers
"""

import strawberry

from opsgraph.schemas.owner import OwnerCreate
from opsgraph.schemas.project import ProjectCreate

from ..context import get_services, to_schema
from ..inputs import CreateOwnerInput, CreateProjectInput
from ..types.projects import Owner, Project


async def resolve_owner(info: strawberry.Info, owner_id: str) -> Owner:
    return Owner.from_document(await get_services(info).owners.get_owner(owner_id))


async def resolve_all_owners(info: strawberry.Info) -> list[Owner]:
    return [Owner.from_document(doc) for doc in await get_services(info).owners.get_owners()]


async def create_owner(info: strawberry.Info, input: CreateOwnerInput) -> Owner:
    data = to_schema(OwnerCreate, input)
    return Owner.from_document(await get_services(info).owners.create_owner(data))


async def resolve_project(info: strawberry.Info, project_id: str) -> Project:
    return Project.from_document(await get_services(info).projects.get_project(project_id))


async def resolve_all_projects(info: strawberry.Info) -> list[Project]:
    return [Project.from_document(doc) for doc in await get_services(info).projects.get_projects()]


async def create_project(info: strawberry.Info, input: CreateProjectInput) -> Project:
    """Create a project. The owner id is stored without checking it."""
    data = to_schema(ProjectCreate, input)
    return Project.from_document(await get_services(info).projects.create_project(data))
