"""
Entry point for the projects console.

Wires settings, logging, the connection provider, store and service, then
hands control to the menu loop.
"""
import sys

from projects_app.cli.app import ProjectsApp
from projects_app.core.config import get_settings
from projects_app.core.logging import get_logger, setup_logging
from projects_app.db.session import ConnectionProvider
from projects_app.services.project_service import ProjectService
from projects_app.store.project_store import ProjectStore


def build_service(settings=None) -> ProjectService:
    settings = settings or get_settings()
    return ProjectService(ProjectStore(ConnectionProvider(settings)))


def main() -> int:
    settings = get_settings()
    setup_logging(settings)
    get_logger(__name__).info(
        "Starting", app=settings.PROJECT_NAME, version=settings.VERSION, target=settings.database_target
    )

    ProjectsApp(build_service(settings)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
