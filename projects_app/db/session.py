"""
Connection Provider Module

Opens one database connection per logical operation. The engine is built with
NullPool, so every acquire() opens a fresh DBAPI connection and closing it
really closes it; nothing is shared between two operations.
"""
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from projects_app.core.config import Settings, get_settings
from projects_app.core.exceptions import DatabaseConnectionError
from projects_app.core.logging import get_logger

logger = get_logger(__name__)

# Global tunnel instance, opened at most once per process
_tunnel = None


def _tunnel_url(settings: Settings) -> URL:
    """Start the SSH tunnel if needed and point the MySQL URL at its local port."""
    global _tunnel

    from sshtunnel import SSHTunnelForwarder

    if _tunnel is None:
        _tunnel = SSHTunnelForwarder(
            (settings.SSH_HOST, 22),
            ssh_username=settings.SSH_USER,
            ssh_password=settings.SSH_PASSWORD,
            remote_bind_address=(settings.DB_HOST, settings.DB_PORT),
            set_keepalive=60  # Send keepalive packets every 60 seconds
        )
        _tunnel.start()

    return settings.database_url.set(host="127.0.0.1", port=_tunnel.local_bind_port)


def build_engine(settings: Settings) -> Engine:
    """
    Create the engine for the configured database.

    Args:
        settings: Application settings holding the connection target

    Returns:
        Engine: An engine that never pools connections
    """
    url = _tunnel_url(settings) if settings.USE_SSH else settings.database_url
    engine = create_engine(url, poolclass=NullPool, echo=settings.SQL_ECHO)

    if engine.dialect.name == "sqlite":
        # SQLite only honours ON DELETE CASCADE when enabled per connection
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


class ConnectionProvider:
    """
    Hands out one connection per call to acquire().

    The returned connection is a context manager; callers use it in a
    ``with`` block so it is closed on every exit path.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._engine: Optional[Engine] = None

    @property
    def target(self) -> str:
        return self._settings.database_target

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = build_engine(self._settings)
        return self._engine

    def acquire(self) -> Connection:
        """
        Open a new connection to the configured database.

        Returns:
            Connection: A fresh, unshared connection

        Raises:
            DatabaseConnectionError: If the database cannot be reached
        """
        logger.debug("Connecting", target=self.target)
        try:
            connection = self.engine.connect()
        except (SQLAlchemyError, OSError) as e:
            logger.error("Unable to get connection", target=self.target, error=str(e))
            raise DatabaseConnectionError(self.target) from e
        logger.debug("Connection obtained", database=self._settings.database_url.database)
        return connection

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
