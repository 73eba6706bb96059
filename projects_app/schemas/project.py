"""
Project Entity Schemas

Immutable entities returned by the store. A Project carries only its scalar
fields; ProjectDetails is the full aggregate with materials, steps and
categories, built in one piece once every child query has succeeded.
"""
from decimal import Decimal
from typing import Annotated, Any, Optional, Tuple

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

TWO_PLACES = Decimal("0.01")


def _coerce_decimal(value: Any) -> Any:
    # SQLite hands DECIMAL columns back as floats; go through str to avoid binary noise
    if isinstance(value, float):
        return Decimal(str(value))
    return value


# Non-negative amount with at most two decimal places, normalized to exactly two
Hours = Annotated[
    Decimal,
    Field(ge=0, max_digits=7, decimal_places=2),
    BeforeValidator(_coerce_decimal),
    AfterValidator(lambda v: v.quantize(TWO_PLACES)),
]
Money = Hours


class Entity(BaseModel):
    """Common configuration for all entities."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Material(Entity):
    material_id: int
    project_id: int
    material_name: str
    num_required: Optional[int] = None
    cost: Optional[Money] = None


class Step(Entity):
    step_id: int
    project_id: int
    step_text: str
    step_order: int


class Category(Entity):
    category_id: int
    category_name: str


class Project(Entity):
    """
    A project's scalar fields.

    Attributes:
        project_id: Assigned by the database on insert; None before that
        project_name: Project name (required)
        estimated_hours: Estimated effort, two decimal places
        actual_hours: Effort actually spent, two decimal places
        difficulty: 1 (easy) to 5 (hard), optional; range is checked on input
        notes: Free-form notes
    """
    project_id: Optional[int] = None
    project_name: str
    estimated_hours: Optional[Hours] = None
    actual_hours: Optional[Hours] = None
    difficulty: Optional[int] = None
    notes: Optional[str] = None


class ProjectDetails(Project):
    """A project together with everything it owns."""
    materials: Tuple[Material, ...] = ()
    steps: Tuple[Step, ...] = ()
    categories: Tuple[Category, ...] = ()

    @classmethod
    def assemble(
        cls,
        project: Project,
        materials: Tuple[Material, ...],
        steps: Tuple[Step, ...],
        categories: Tuple[Category, ...],
    ) -> "ProjectDetails":
        return cls(
            **project.model_dump(),
            materials=materials,
            steps=steps,
            categories=categories,
        )


class ProjectSummary(Entity):
    """Identifier and name, as shown in the project listing."""
    project_id: int
    project_name: str
