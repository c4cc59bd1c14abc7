"""User entity package.

- User / UserUpdate: domain entity and partial-update payload
- UserTable: database persistence model
- UserRepository: data access layer
"""

from .entity import SelectorKind, User, UserUpdate
from .repository import (
    ConstraintViolationError,
    RepositoryError,
    StoreError,
    UserRepository,
)
from .table import UserTable

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
