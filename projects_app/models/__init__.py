from .project import ProjectTable
from .material import MaterialTable
from .step import StepTable
from .category import CategoryTable, ProjectCategoryTable

__all__ = [
    "ProjectTable",
    "MaterialTable",
    "StepTable",
    "CategoryTable", "ProjectCategoryTable",
]
