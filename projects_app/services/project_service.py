"""
Project Service Module

The only caller of the project store. Forwards each request and turns
"nothing matched" outcomes into NotFoundError; it never issues SQL itself.
"""
from typing import List, Optional

from projects_app.core.exceptions import NotFoundError
from projects_app.db.session import ConnectionProvider
from projects_app.schemas.project import Project, ProjectDetails, ProjectSummary
from projects_app.store.project_store import Absent, ProjectStore

RESOURCE = "Project"


class ProjectService:

    def __init__(self, store: Optional[ProjectStore] = None):
        self._store = store or ProjectStore(ConnectionProvider())

    def add_project(self, project: Project) -> Project:
        """Store a new project and return it with its generated ID."""
        return self._store.insert(project)

    def list_project_names(self) -> List[ProjectSummary]:
        """ID and name of every project, in the store's order (by name)."""
        return [
            ProjectSummary(project_id=p.project_id, project_name=p.project_name)
            for p in self._store.list_all()
        ]

    def fetch_project_by_id(self, project_id: int) -> ProjectDetails:
        """
        Fetch a project with its materials, steps and categories.

        Raises:
            NotFoundError: If no project has this ID
        """
        result = self._store.fetch_by_id(project_id)
        if isinstance(result, Absent):
            raise NotFoundError(RESOURCE, project_id)
        return result.value

    def modify_project_details(self, project: Project) -> None:
        """
        Replace the details of an existing project.

        Raises:
            NotFoundError: If no project has this ID
        """
        if not self._store.update(project):
            raise NotFoundError(RESOURCE, project.project_id)

    def delete_project(self, project_id: int) -> None:
        """
        Delete a project.

        Raises:
            NotFoundError: If no project has this ID
        """
        if not self._store.delete(project_id):
            raise NotFoundError(RESOURCE, project_id)
