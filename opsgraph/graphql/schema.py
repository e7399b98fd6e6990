"""
Main GraphQL schema definition using Strawberry
"""

import logging
from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from .mutations.root import Mutation
from .queries.root import Query

logger = logging.getLogger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        RuntimeError: If the schema is invalid
    """
    errors = gql_validate_schema(schema._schema)
    if errors:
        error_messages = [str(e) for e in errors]
        logger.error(f"GraphQL schema validation failed: {'; '.join(error_messages)}")
        raise RuntimeError(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(path: str = "/graphql", graphiql: bool = True) -> GraphQLRouter:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "services": request.app.state.services,
        }

    return GraphQLRouter(
        schema,
        path=path,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
