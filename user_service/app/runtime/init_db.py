"""Database initialization script."""

from user_service.app.core.services import DbManageService, DbSessionService


def init_db(drop_existing: bool = False) -> None:
    """Create all database tables, optionally dropping them first."""
    database_service = DbSessionService()
    try:
        manager = DbManageService(database_service.engine)
        if drop_existing:
            manager.drop_all()
        manager.create_all()
    finally:
        database_service.dispose()


def main() -> None:
    init_db()


if __name__ == "__main__":
    main()
