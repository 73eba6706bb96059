"""
Project Model Module

This module defines the table backing project records. The store queries it
with plain SQL; the model exists so the schema can be created for local
databases and so seeding scripts can write rows through a Session.
"""
from decimal import Decimal
from typing import Optional

from sqlmodel import SQLModel, Field, Text


class ProjectTable(SQLModel, table=True):
    """
    A project row.

    Attributes:
        project_id: Auto-incrementing primary key
        project_name: Project name (required)
        estimated_hours: Estimated effort, DECIMAL(7,2)
        actual_hours: Effort actually spent, DECIMAL(7,2)
        difficulty: 1 to 5; range is checked before writes reach the database
        notes: Free-form notes
    """
    __tablename__ = "project"
    # Deleted identifiers are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    # Primary key
    project_id: Optional[int] = Field(default=None, primary_key=True)

    project_name: str = Field(max_length=128, nullable=False)
    estimated_hours: Optional[Decimal] = Field(default=None, max_digits=7, decimal_places=2)
    actual_hours: Optional[Decimal] = Field(default=None, max_digits=7, decimal_places=2)
    difficulty: Optional[int] = None
    notes: Optional[str] = Field(default=None, sa_type=Text)
