from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from user_service.app.core.services import BcryptPasswordHasher, UserService
from user_service.app.entities.core.user import UserRepository

# Cheapest cost bcrypt accepts; keeps the suite fast
_TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def engine() -> Generator[Engine]:
    """Fresh in-memory database shared across threads."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from user_service.app.entities.core.user import UserTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a fresh database session for testing."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=_TEST_BCRYPT_ROUNDS)


@pytest.fixture
def user_repo(session: Session) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
def user_service(user_repo: UserRepository, password_hasher: BcryptPasswordHasher) -> UserService:
    return UserService(user_repo, password_hasher)


@pytest.fixture
def client(session: Session, password_hasher: BcryptPasswordHasher) -> Generator[TestClient]:
    """TestClient wired to the test session and a low-cost hasher.

    The lifespan is not entered, so no engine is built from config.yaml.
    """
    from user_service.app.api.http.app import app
    from user_service.app.api.http.deps import get_db_session, get_password_hasher

    def override_get_session():
        yield session

    app.dependency_overrides[get_db_session] = override_get_session
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
