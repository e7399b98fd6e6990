"""
Access to the per-request GraphQL context
"""

from typing import TypeVar

import strawberry
from pydantic import BaseModel, ValidationError

from opsgraph.core.exceptions import ValidationFailed
from opsgraph.dependencies.services import ServiceRegistry

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def get_services(info: strawberry.Info) -> ServiceRegistry:
    """Return the services injected into the GraphQL context."""
    return info.context["services"]


def to_schema(schema_cls: type[SchemaT], input_obj: object) -> SchemaT:
    """
    Convert a GraphQL input object into its pydantic schema.

    Raises:
        ValidationFailed: If the input does not satisfy the schema
    """
    try:
        return schema_cls.model_validate(strawberry.asdict(input_obj))
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise ValidationFailed(
            f"Invalid {schema_cls.__name__} input", {"errors": errors}
        ) from e
