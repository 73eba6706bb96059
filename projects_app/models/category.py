"""
Category Model Module

This module defines the Category table and the ProjectCategory junction table
for the many-to-many relationship between projects and categories.
"""
from typing import Optional

from sqlmodel import SQLModel, Field


class CategoryTable(SQLModel, table=True):
    __tablename__ = "category"

    category_id: Optional[int] = Field(default=None, primary_key=True)
    category_name: str = Field(max_length=128, nullable=False)


class ProjectCategoryTable(SQLModel, table=True):
    """
    Junction table for many-to-many relationship between Projects and Categories.

    The table stores only the two foreign keys, which together form its
    primary key.

    Attributes:
        project_id: Foreign key to the project
        category_id: Foreign key to the category
    """
    __tablename__ = "project_category"

    project_id: int = Field(foreign_key="project.project_id", ondelete="CASCADE", primary_key=True)
    category_id: int = Field(foreign_key="category.category_id", ondelete="CASCADE", primary_key=True)
