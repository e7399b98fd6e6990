"""
Error taxonomy shared by repositories, services and the GraphQL layer.
"""
from typing import Any, Dict, Optional


class OpsGraphError(Exception):
    """Base class for all errors reported to API clients."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        # Picked up by graphql-core as the extensions of the reported error
        self.extensions: Dict[str, Any] = {"code": self.code, **self.details}


class InvalidIdentifier(OpsGraphError):
    """A supplied id does not parse as a valid key."""

    code = "INVALID_IDENTIFIER"

    def __init__(self, id_value: Any):
        super().__init__(f"Invalid identifier '{id_value}'", {"id": str(id_value)})
        self.id_value = id_value


class NotFound(OpsGraphError):
    """A syntactically valid id has no corresponding document."""

    code = "NOT_FOUND"

    def __init__(self, entity: str, id_value: Any):
        super().__init__(
            f"{entity} with ID '{id_value}' not found",
            {"entity": entity, "id": str(id_value)}
        )
        self.entity = entity
        self.id_value = id_value


class ValidationFailed(OpsGraphError):
    """Mutation input was rejected before reaching the database."""

    code = "VALIDATION_FAILED"


class PersistenceFailure(OpsGraphError):
    """The backing store operation itself failed."""

    code = "PERSISTENCE_FAILURE"
