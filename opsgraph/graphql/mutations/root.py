"""
Root GraphQL mutation definitions
"""

import strawberry

from ..inputs import (
    CreateEmployeeInput,
    CreateLocationInput,
    CreateOwnerInput,
    CreateProjectInput,
    CreateRankInput,
    CreateStoreInput,
    DeleteEmployeeInput,
    UpdateEmployeeInput,
)
from ..types.operations import Employee, Location, Rank, Store
from ..types.projects import Owner, Project


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # Employee mutations
    @strawberry.mutation
    async def create_employee(self, info: strawberry.Info, input: CreateEmployeeInput) -> Employee:
        """Create a new employee. Unknown rank and store references are dropped."""
        from ..resolvers.employee import create_employee

        return await create_employee(info, input)

    @strawberry.mutation
    async def update_employee(self, info: strawberry.Info, input: UpdateEmployeeInput) -> Employee:
        """Update an existing employee."""
        from ..resolvers.employee import update_employee

        return await update_employee(info, input)

    @strawberry.mutation
    async def delete_employee(self, info: strawberry.Info, input: DeleteEmployeeInput) -> Employee:
        """Delete an employee."""
        from ..resolvers.employee import delete_employee

        return await delete_employee(info, input)

    # Catalog mutations
    @strawberry.mutation
    async def create_store(self, info: strawberry.Info, input: CreateStoreInput) -> Store:
        """Create a new store."""
        from ..resolvers.catalog import create_store

        return await create_store(info, input)

    @strawberry.mutation
    async def create_location(self, info: strawberry.Info, input: CreateLocationInput) -> Location:
        from ..resolvers.catalog import create_location

        return await create_location(info, input)

    @strawberry.mutation
    async def create_rank(self, info: strawberry.Info, input: CreateRankInput) -> Rank:
        from ..resolvers.catalog import create_rank

        return await create_rank(info, input)

    # Project mutations
    @strawberry.mutation
    async def create_owner(self, info: strawberry.Info, input: CreateOwnerInput) -> Owner:
        """Create a new project owner."""
        from ..resolvers.project import create_owner

        return await create_owner(info, input)

    @strawberry.mutation
    async def create_project(self, info: strawberry.Info, input: CreateProjectInput) -> Project:
        """Create a new project."""
        from ..resolvers.project import create_project

        return await create_project(info, input)
