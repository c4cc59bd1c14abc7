"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .security.password_hasher import BcryptPasswordHasher, PasswordHasher
from .user.results import Err, Ok, Result, UserError, UserErrorKind
from .user.user_service import UserService

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Security
    "BcryptPasswordHasher",
    "PasswordHasher",
    # User Services
    "Err",
    "Ok",
    "Result",
    "UserError",
    "UserErrorKind",
    "UserService",
]
