"""
Record Mapper Module

Turns one result row into one entity by looking up each declared field's
column by name. A field maps to the column of the same name unless it declares
a ``validation_alias``, in which case that alias is the column name.
"""
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from projects_app.core.exceptions import MappingError

E = TypeVar("E", bound=BaseModel)

# Aggregate-only fields, filled by the store from child queries
_AGGREGATE_FIELDS = frozenset({"materials", "steps", "categories"})


def column_for(name: str, field: Any) -> str:
    alias = field.validation_alias
    return alias if isinstance(alias, str) else name


def extract(row: Any, entity: Type[E]) -> E:
    """
    Map a result row onto ``entity``.

    Args:
        row: A SQLAlchemy Row, or any mapping of column name to value
        entity: The entity class to build

    Returns:
        The populated entity

    Raises:
        MappingError: If an expected column is absent or its value does not fit
    """
    columns: Mapping[str, Any] = getattr(row, "_mapping", row)

    values = {}
    for name, field in entity.model_fields.items():
        if name in _AGGREGATE_FIELDS:
            continue
        column = column_for(name, field)
        if column not in columns:
            raise MappingError(entity.__name__, column)
        values[name] = columns[column]

    try:
        return entity.model_validate(values)
    except PydanticValidationError as e:
        bad = e.errors()[0]
        column = str(bad["loc"][0]) if bad["loc"] else "?"
        if column in entity.model_fields:
            column = column_for(column, entity.model_fields[column])
        raise MappingError(
            entity.__name__, column, reason=f"has an invalid value ({bad['msg']})"
        ) from e
