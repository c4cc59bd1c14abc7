"""Database engine and session factory used across the application."""

from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from user_service.app.runtime.config.config_data import DatabaseConfig
from user_service.app.runtime.context import get_config


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig | None = None, environment: str | None = None):
        """Create the shared engine from the database configuration."""
        main_config = get_config()
        self._config = db_config or main_config.database
        self._environment = environment or main_config.app.environment

        logger.info("Configuring database engine for environment: {}", self._environment)
        engine_kwargs: dict[str, Any] = {
            "pool_pre_ping": True,
            "echo": False,
            "connect_args": self._get_connect_args(),
            **self._get_pool_args(),
        }
        self._engine = create_engine(self._config.connection_string, **engine_kwargs)

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_pool_args(self) -> dict[str, Any]:
        # SQLite uses a single-connection/static pool without sizing options.
        if self._config.is_sqlite:
            return {}
        return {
            "pool_size": self._config.pool_size,
            "max_overflow": self._config.max_overflow,
            "pool_timeout": self._config.pool_timeout,
            "pool_recycle": self._config.pool_recycle,
        }

    def _get_connect_args(self) -> dict[str, Any]:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if self._config.url.startswith("postgresql"):
            connect_args.update(
                {
                    "application_name": f"{self._environment}_user_service",
                    "connect_timeout": 30,
                }
            )
        elif self._config.is_sqlite:
            connect_args.update(
                {
                    # FastAPI runs sync endpoints in a threadpool
                    "check_same_thread": False,
                    "timeout": 20,
                }
            )
            if self._environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self._engine, expire_on_commit=False)

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def dispose(self) -> None:
        self._engine.dispose()
