"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from user_service.app.api.http.app_data import ApplicationDependencies
from user_service.app.core.services import PasswordHasher, UserService
from user_service.app.entities.core.user import UserRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Yield one database session per request."""
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_password_hasher(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> PasswordHasher:
    return app_deps.password_hasher


def get_user_repository(db: Session = Depends(get_db_session)) -> UserRepository:
    return UserRepository(db)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    """Get the User service instance."""
    return UserService(repository, password_hasher)
