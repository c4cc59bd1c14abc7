"""Test configuration and fixtures for user-service."""

from tests.fixtures.core import (  # noqa: F401
    client,
    engine,
    password_hasher,
    session,
    user_repo,
    user_service,
)
