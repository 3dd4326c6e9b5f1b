"""
Database initialization script.
"""
from creator_finance.core.config import get_settings
from creator_finance.core.logging import configure_logging
from creator_finance.db.session import Database


def init_db():
    """Create all tables on the configured database."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    database = Database.from_settings(settings)
    try:
        database.create_all()
    finally:
        database.dispose()


if __name__ == "__main__":
    print("Initializing database...")
    init_db()
    print("Database initialized successfully!")
