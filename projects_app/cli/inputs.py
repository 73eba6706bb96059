"""
Input Parsing Module

Turns raw console strings into typed values. A blank string means "no
value" and parses to None; anything that does not parse raises
ValidationError before the database is touched.
"""
from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from projects_app.core.exceptions import ValidationError
from projects_app.schemas.project import TWO_PLACES, Project

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5


def clean(raw: Optional[str]) -> Optional[str]:
    """Strip the input; blank becomes None."""
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def parse_int(raw: Optional[str], field: Optional[str] = None) -> Optional[int]:
    value = clean(raw)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{value} is not a valid number.", field=field) from None


def parse_decimal(raw: Optional[str], field: Optional[str] = None) -> Optional[Decimal]:
    """Parse a decimal with at most two places, normalized to exactly two."""
    value = clean(raw)
    if value is None:
        return None
    try:
        number = Decimal(value)
    except InvalidOperation:
        raise ValidationError(f"{value} is not a valid decimal number.", field=field) from None
    if not number.is_finite() or number.as_tuple().exponent < -2:
        raise ValidationError(f"{value} is not a valid decimal number.", field=field)
    return number.quantize(TWO_PLACES)


def validate_difficulty(difficulty: Optional[int]) -> Optional[int]:
    if difficulty is not None and not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ValidationError(
            f"{difficulty} is not between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}.",
            field="difficulty",
        )
    return difficulty


def build_project(**fields) -> Project:
    """
    Build a Project from already-parsed values.

    Raises:
        ValidationError: If any field is out of range (e.g. negative hours)
    """
    validate_difficulty(fields.get("difficulty"))
    name = fields.get("project_name")
    if isinstance(name, str) and not name.strip():
        raise ValidationError("Invalid project_name: name cannot be blank", field="project_name")
    try:
        return Project(**fields)
    except PydanticValidationError as e:
        bad = e.errors()[0]
        field = str(bad["loc"][0]) if bad["loc"] else None
        raise ValidationError(f"Invalid {field}: {bad['msg']}", field=field) from e
