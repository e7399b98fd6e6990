"""
Root GraphQL query definitions
"""

import strawberry

from ..inputs import FetchInput
from ..types.operations import Employee, Location, Rank, Store
from ..types.projects import Owner, Project


@strawberry.type
class Query:
    """Root GraphQL query type."""

    # Operations domain
    @strawberry.field
    async def get_employee(self, info: strawberry.Info, input: FetchInput) -> Employee:
        """Get an employee by ID."""
        from ..resolvers.employee import resolve_employee

        return await resolve_employee(info, input.id)

    @strawberry.field
    async def get_all_employees(self, info: strawberry.Info) -> list[Employee]:
        """Get every employee."""
        from ..resolvers.employee import resolve_all_employees

        return await resolve_all_employees(info)

    @strawberry.field
    async def get_store(self, info: strawberry.Info, input: FetchInput) -> Store:
        """Get a store by ID."""
        from ..resolvers.catalog import resolve_store

        return await resolve_store(info, input.id)

    @strawberry.field
    async def get_all_stores(self, info: strawberry.Info) -> list[Store]:
        from ..resolvers.catalog import resolve_all_stores

        return await resolve_all_stores(info)

    @strawberry.field
    async def get_location(self, info: strawberry.Info, input: FetchInput) -> Location:
        """Get a location by ID."""
        from ..resolvers.catalog import resolve_location

        return await resolve_location(info, input.id)

    @strawberry.field
    async def get_all_locations(self, info: strawberry.Info) -> list[Location]:
        from ..resolvers.catalog import resolve_all_locations

        return await resolve_all_locations(info)

    @strawberry.field
    async def get_rank(self, info: strawberry.Info, input: FetchInput) -> Rank:
        """Get a rank by ID."""
        from ..resolvers.catalog import resolve_rank

        return await resolve_rank(info, input.id)

    @strawberry.field
    async def get_all_ranks(self, info: strawberry.Info) -> list[Rank]:
        from ..resolvers.catalog import resolve_all_ranks

        return await resolve_all_ranks(info)

    # Project domain
    @strawberry.field
    async def get_owner(self, info: strawberry.Info, input: FetchInput) -> Owner:
        """Get a project owner by ID."""
        from ..resolvers.project import resolve_owner

        return await resolve_owner(info, input.id)

    @strawberry.field
    async def get_all_owners(self, info: strawberry.Info) -> list[Owner]:
        from ..resolvers.project import resolve_all_owners

        return await resolve_all_owners(info)

    @strawberry.field
    async def get_project(self, info: strawberry.Info, input: FetchInput) -> Project:
        """Get a project by ID."""
        from ..resolvers.project import resolve_project

        return await resolve_project(info, input.id)

    @strawberry.field
    async def get_all_projects(self, info: strawberry.Info) -> list[Project]:
        from ..resolvers.project import resolve_all_projects

        return await resolve_all_projects(info)
