"""Database initialization script."""

from src.app.api.utils.app_startup import configure_logging
from src.app.core.services import DbManageService, DbSessionService


def init_db() -> None:
    """Create all database tables."""
    database_service = DbSessionService()
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    configure_logging()
    init_db()
