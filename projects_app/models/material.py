"""
Material Model Module

Materials a project needs. Rows are removed with their project through the
foreign key's ON DELETE CASCADE.
"""
from decimal import Decimal
from typing import Optional

from sqlmodel import SQLModel, Field


class MaterialTable(SQLModel, table=True):
    __tablename__ = "material"

    material_id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="project.project_id", ondelete="CASCADE", nullable=False)
    material_name: str = Field(max_length=128, nullable=False)
    num_required: Optional[int] = None
    cost: Optional[Decimal] = Field(default=None, max_digits=7, decimal_places=2)
