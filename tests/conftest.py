"""
Pytest configuration and fixtures for the test suite.

Every test gets its own SQLite file under tmp_path with the five tables
created, and a real ConnectionProvider -> ProjectStore -> ProjectService
stack pointed at it.
"""
from decimal import Decimal
from pathlib import Path

import pytest
from sqlalchemy import text
from sqlmodel import Session, SQLModel

import projects_app.models  # noqa: F401
from projects_app.core.config import Settings
from projects_app.core.logging import setup_logging
from projects_app.db.session import ConnectionProvider
from projects_app.models import CategoryTable, MaterialTable, ProjectCategoryTable, StepTable
from projects_app.services.project_service import ProjectService
from projects_app.store.project_store import ProjectStore


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    setup_logging(Settings(LOG_LEVEL="WARNING"))


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'projects.db'}")


@pytest.fixture
def provider(settings):
    provider = ConnectionProvider(settings)
    SQLModel.metadata.create_all(provider.engine)
    yield provider
    provider.dispose()


@pytest.fixture
def store(provider) -> ProjectStore:
    return ProjectStore(provider)


@pytest.fixture
def service(store) -> ProjectService:
    return ProjectService(store)


@pytest.fixture
def project_count(provider):
    """Count project rows directly, bypassing the store."""
    def count() -> int:
        with provider.acquire() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM project")).scalar()
    return count


@pytest.fixture
def seed_children(provider):
    """Attach materials, steps and categories to a project through the table models."""
    def seed(project_id: int, materials: int = 0, steps: int = 0, categories: int = 0) -> dict:
        ids = {"materials": set(), "steps": set(), "categories": set()}
        with Session(provider.engine) as session:
            rows = []
            for i in range(materials):
                row = MaterialTable(
                    project_id=project_id,
                    material_name=f"Material {i}",
                    num_required=i + 1,
                    cost=Decimal("1.25") * (i + 1),
                )
                session.add(row)
                rows.append(("materials", row, "material_id"))
            for i in range(steps):
                row = StepTable(project_id=project_id, step_text=f"Step {i}", step_order=i + 1)
                session.add(row)
                rows.append(("steps", row, "step_id"))
            for i in range(categories):
                row = CategoryTable(category_name=f"Category {project_id}-{i}")
                session.add(row)
                session.flush()
                session.add(ProjectCategoryTable(project_id=project_id, category_id=row.category_id))
                rows.append(("categories", row, "category_id"))
            session.flush()
            for kind, row, key in rows:
                ids[kind].add(getattr(row, key))
            session.commit()
        return ids
    return seed
