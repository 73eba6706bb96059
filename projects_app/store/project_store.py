"""
Project Store Module

Persists projects and reads them back with their materials, steps and
categories. Every operation opens exactly one connection and runs inside
exactly one transaction, so multi-statement work (insert then read the
generated key, or the four queries of a full fetch) is all-or-nothing.
"""
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple, Type, TypeVar, Union

from sqlalchemy import Numeric, bindparam, text
from sqlalchemy.engine import Connection

from projects_app.core.exceptions import PersistenceError
from projects_app.core.logging import get_logger
from projects_app.db.mapper import extract
from projects_app.db.session import ConnectionProvider
from projects_app.db.transaction import TransactionHelper
from projects_app.schemas.project import Category, Material, Project, ProjectDetails, Step

logger = get_logger(__name__)

E = TypeVar("E")

CATEGORY_TABLE = "category"
MATERIAL_TABLE = "material"
PROJECT_TABLE = "project"
PROJECT_CATEGORY_TABLE = "project_category"
STEP_TABLE = "step"

PROJECT_COLUMNS = "project_id, project_name, estimated_hours, actual_hours, difficulty, notes"

# Typed so drivers without a native DECIMAL (SQLite) receive a float
HOURS_PARAMS = (
    bindparam("estimated_hours", type_=Numeric(7, 2)),
    bindparam("actual_hours", type_=Numeric(7, 2)),
)

INSERT_PROJECT = text(
    f"INSERT INTO {PROJECT_TABLE} "
    "(project_name, estimated_hours, actual_hours, difficulty, notes) "
    "VALUES (:project_name, :estimated_hours, :actual_hours, :difficulty, :notes)"
).bindparams(*HOURS_PARAMS)
SELECT_ALL_PROJECTS = text(
    f"SELECT {PROJECT_COLUMNS} FROM {PROJECT_TABLE} ORDER BY project_name"
)
SELECT_PROJECT = text(
    f"SELECT {PROJECT_COLUMNS} FROM {PROJECT_TABLE} WHERE project_id = :project_id"
)
UPDATE_PROJECT = text(
    f"UPDATE {PROJECT_TABLE} SET "
    "project_name = :project_name, "
    "estimated_hours = :estimated_hours, "
    "actual_hours = :actual_hours, "
    "difficulty = :difficulty, "
    "notes = :notes "
    "WHERE project_id = :project_id"
).bindparams(*HOURS_PARAMS)
DELETE_PROJECT = text(f"DELETE FROM {PROJECT_TABLE} WHERE project_id = :project_id")

SELECT_MATERIALS = text(
    "SELECT material_id, project_id, material_name, num_required, cost "
    f"FROM {MATERIAL_TABLE} WHERE project_id = :project_id"
)
SELECT_STEPS = text(
    "SELECT step_id, project_id, step_text, step_order "
    f"FROM {STEP_TABLE} WHERE project_id = :project_id ORDER BY step_order"
)
SELECT_CATEGORIES = text(
    "SELECT c.category_id, c.category_name "
    f"FROM {CATEGORY_TABLE} c "
    f"JOIN {PROJECT_CATEGORY_TABLE} pc ON pc.category_id = c.category_id "
    "WHERE pc.project_id = :project_id"
)


class Present:
    """fetch_by_id found the project."""
    __slots__ = ("value",)

    def __init__(self, value: ProjectDetails):
        self.value = value

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


class Absent:
    """fetch_by_id found no project with the requested identifier."""
    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Absent()"


FetchResult = Union[Present, Absent]


def _scalar_params(project: Project) -> dict:
    return project.model_dump(include={
        "project_name", "estimated_hours", "actual_hours", "difficulty", "notes",
    })


def _fetch_children(conn: Connection, sql, entity: Type[E], project_id: int) -> Tuple[E, ...]:
    rows = conn.execute(sql, {"project_id": project_id})
    return tuple(extract(row, entity) for row in rows)


def fetch_materials(conn: Connection, project_id: int) -> Tuple[Material, ...]:
    return _fetch_children(conn, SELECT_MATERIALS, Material, project_id)


def fetch_steps(conn: Connection, project_id: int) -> Tuple[Step, ...]:
    return _fetch_children(conn, SELECT_STEPS, Step, project_id)


def fetch_categories(conn: Connection, project_id: int) -> Tuple[Category, ...]:
    return _fetch_children(conn, SELECT_CATEGORIES, Category, project_id)


class ProjectStore:
    """
    SQL access to the project table and the tables it owns.

    Holds a connection provider and a transaction helper; neither is shared
    state between operations.
    """

    def __init__(
        self,
        connections: ConnectionProvider,
        transactions: Optional[TransactionHelper] = None,
    ):
        self._connections = connections
        self._tx = transactions or TransactionHelper()

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[Connection]:
        """
        One connection, one transaction.

        Commits when the block finishes; on any failure rolls back and raises
        PersistenceError chained to the cause. A connection failure is raised
        before the transaction begins and is not wrapped.
        """
        with self._connections.acquire() as conn:
            try:
                self._tx.begin(conn)
                yield conn
                self._tx.commit(conn)
            except Exception as e:
                logger.warning("Rolling back", operation=operation, error=str(e))
                try:
                    self._tx.rollback(conn)
                except Exception:
                    logger.exception("Rollback failed", operation=operation)
                if isinstance(e, PersistenceError):
                    raise
                raise PersistenceError(f"{operation} failed: {e}") from e

    def insert(self, project: Project) -> Project:
        """
        Insert a new project.

        Args:
            project: The project to store; its project_id must be None

        Returns:
            Project: A copy of ``project`` carrying the generated project_id
        """
        if project.project_id is not None:
            raise ValueError(f"Project already has ID={project.project_id}")

        with self._transaction("insert project") as conn:
            conn.execute(INSERT_PROJECT, _scalar_params(project))
            project_id = self._tx.last_inserted_id(conn, PROJECT_TABLE)

        logger.debug("Inserted project", project_id=project_id)
        return project.model_copy(update={"project_id": project_id})

    def list_all(self) -> List[Project]:
        """All projects ordered by name, without their child collections."""
        with self._transaction("list projects") as conn:
            rows = conn.execute(SELECT_ALL_PROJECTS)
            return [extract(row, Project) for row in rows]

    def fetch_by_id(self, project_id: int) -> FetchResult:
        """
        Fetch one project with its materials, steps and categories.

        Returns:
            Present wrapping the full aggregate, or Absent when no project
            has this identifier. The aggregate is only built after all four
            queries succeed.
        """
        with self._transaction("fetch project") as conn:
            row = conn.execute(SELECT_PROJECT, {"project_id": project_id}).first()
            if row is None:
                return Absent()

            project = extract(row, Project)
            details = ProjectDetails.assemble(
                project,
                materials=fetch_materials(conn, project_id),
                steps=fetch_steps(conn, project_id),
                categories=fetch_categories(conn, project_id),
            )
        return Present(details)

    def update(self, project: Project) -> bool:
        """
        Replace the mutable fields of an existing project.

        Returns:
            bool: True if exactly one row changed, False if the project does not exist
        """
        if project.project_id is None:
            raise ValueError("Cannot update a project without an ID")

        params = _scalar_params(project)
        params["project_id"] = project.project_id
        with self._transaction("update project") as conn:
            result = conn.execute(UPDATE_PROJECT, params)
            return result.rowcount == 1

    def delete(self, project_id: int) -> bool:
        """
        Delete a project by identifier.

        Child rows are left to the schema's foreign key rules.

        Returns:
            bool: True if exactly one row was deleted, False if the project does not exist
        """
        with self._transaction("delete project") as conn:
            result = conn.execute(DELETE_PROJECT, {"project_id": project_id})
            return result.rowcount == 1
