"""Entities organised by business concept.

Each entity package colocates:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core.user import (
    ConstraintViolationError,
    RepositoryError,
    SelectorKind,
    StoreError,
    User,
    UserRepository,
    UserTable,
    UserUpdate,
)

__all__ = [
    "ConstraintViolationError",
    "RepositoryError",
    "SelectorKind",
    "StoreError",
    "User",
    "UserRepository",
    "UserTable",
    "UserUpdate",
]
