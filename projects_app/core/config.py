"""
Application Configuration Module

This module defines all configuration settings for the projects console.
Settings are loaded from environment variables (via .env file) using Pydantic.
The settings object is frozen: the connection target is fixed for the
lifetime of the process.
"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application-wide configuration settings.

    All settings can be overridden via environment variables.
    The .env file is automatically loaded if present.
    """
    # === Application Metadata ===
    PROJECT_NAME: str = "Projects Console"
    VERSION: str = "1.0.0"

    # === Database Configuration ===
    # Option 1: Direct connection via DATABASE_URL
    DATABASE_URL: Optional[str] = None  # e.g., "sqlite:///./projects.db"

    # Option 2: Individual database connection parameters (MySQL)
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str = "projects"
    DB_USER: str = "projects"
    DB_PASSWORD: str = "projects"

    SQL_ECHO: bool = False  # Echo every statement through SQLAlchemy's logger

    # === SSH Tunnel Configuration ===
    # Used for connecting to remote MySQL databases (e.g., PythonAnywhere)
    USE_SSH: bool = False
    SSH_HOST: Optional[str] = "ssh.pythonanywhere.com"
    SSH_USER: Optional[str] = None
    SSH_PASSWORD: Optional[str] = None

    # === Logging Configuration ===
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Pydantic configuration
    model_config = SettingsConfigDict(
        env_file=".env",        # Load environment variables from .env file
        case_sensitive=True,    # Environment variable names must match case
        extra="ignore",         # Ignore extra environment variables not defined here
        frozen=True,            # Configuration never changes after start-up
    )

    @property
    def database_url(self) -> URL:
        """
        The SQLAlchemy URL of the target database.

        DATABASE_URL wins when set; otherwise a MySQL URL is assembled from
        the individual DB_* fields.
        """
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    @property
    def database_target(self) -> str:
        """Printable form of the database URL with the password masked."""
        return self.database_url.render_as_string(hide_password=True)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
