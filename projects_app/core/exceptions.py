"""Custom exception classes."""

from typing import Any, Optional


class ProjectsError(Exception):
    """Base application exception."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DatabaseConnectionError(ProjectsError):
    """The database could not be reached."""

    def __init__(self, target: str):
        super().__init__(
            code="CONNECTION_ERROR",
            message=f"Unable to get connection at {target}",
            details={"target": target},
        )
        self.target = target


class ValidationError(ProjectsError):
    """A caller-supplied field is out of its allowed range."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            details={"field": field} if field else None,
        )
        self.field = field


class PersistenceError(ProjectsError):
    """A statement or transaction failed after the transaction began."""

    def __init__(self, message: str, code: str = "PERSISTENCE_ERROR"):
        super().__init__(code=code, message=message)


class MappingError(PersistenceError):
    """A result row does not carry a column the entity expects."""

    def __init__(self, entity: str, column: str, reason: Optional[str] = None):
        message = f"Cannot map {entity}: column '{column}' {reason or 'is missing'}"
        super().__init__(message=message, code="MAPPING_ERROR")
        self.entity = entity
        self.column = column
        self.details = {"entity": entity, "column": column}


class NotFoundError(ProjectsError):
    """No row matches the requested identifier."""

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            code="RESOURCE_NOT_FOUND",
            message=f"{resource} with ID={identifier} does not exist",
            details={"resource": resource, "identifier": identifier},
        )
        self.resource = resource
        self.identifier = identifier
