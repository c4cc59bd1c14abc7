"""Outcome types returned by the user service.

Expected failures (missing record, duplicate e-mail, bad selector) are
values, not exceptions: every service call returns either ``Ok`` or ``Err``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class UserErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_SELECTOR = "invalid_selector"
    UNHANDLED = "unhandled"


@dataclass(frozen=True)
class UserError:
    kind: UserErrorKind
    message: str


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: UserError

    @classmethod
    def of(cls, kind: UserErrorKind, message: str) -> "Err":
        return cls(UserError(kind=kind, message=message))


Result = Ok[T] | Err
