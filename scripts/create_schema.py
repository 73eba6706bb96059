import sys
import os
from sqlmodel import SQLModel
from sqlalchemy import text

# Add current directory to path so we can import projects_app
sys.path.append(os.getcwd())

from projects_app.core.config import get_settings
from projects_app.db.session import ConnectionProvider
import projects_app.models  # noqa: F401  (registers the tables on SQLModel.metadata)


def create_schema():
    print("--- Schema Creation ---")
    settings = get_settings()
    provider = ConnectionProvider(settings)
    print(f"Target: {settings.database_target}")

    try:
        # Creates project, material, step, category and project_category if missing
        print("Attempting to create tables...")
        SQLModel.metadata.create_all(provider.engine)
        print("Table creation/verification successful.")

        with provider.acquire() as conn:
            count = conn.execute(text("SELECT COUNT(*) FROM project")).scalar()
            print(f"Database connection test: SUCCESS ({count} projects)")

    except Exception as e:
        print("Database connection test: FAILED")
        print(f"Error: {e}")
        if "sshtunnel" in str(e).lower():
            print("\nTIP: Make sure your SSH credentials in .env are correct and you are not blocked by a firewall.")
        elif "mysql" in str(e).lower():
            print("\nTIP: Ensure the database server is running and the user has correct permissions.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(create_schema())
