"""
Step Model Module

Ordered instructions belonging to a project.
"""
from typing import Optional

from sqlmodel import SQLModel, Field, Text


class StepTable(SQLModel, table=True):
    __tablename__ = "step"

    step_id: Optional[int] = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="project.project_id", ondelete="CASCADE", nullable=False)
    step_text: str = Field(sa_type=Text, nullable=False)
    step_order: int = Field(nullable=False)
