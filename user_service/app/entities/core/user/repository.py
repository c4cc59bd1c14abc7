"""User data-access layer."""

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from .entity import User
from .table import UserTable


class RepositoryError(Exception):
    """Base class for failures raised by the store."""


class ConstraintViolationError(RepositoryError):
    """A write was rejected by a store constraint (e.g. duplicate e-mail)."""


class StoreError(RepositoryError):
    """Any other failure reported by the store."""


class UserRepository:
    """Data-access layer for users.

    Every write commits before returning, so a caller observes the change as
    soon as the call completes. A failed write rolls the session back and
    raises a ``RepositoryError`` subclass.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, user: User) -> User:
        """Insert ``user`` when it has no id, otherwise overwrite the stored row."""
        row = UserTable.model_validate(user, from_attributes=True)
        try:
            if row.id is None:
                self._session.add(row)
            else:
                row = self._session.merge(row)
            self._session.commit()
            self._session.refresh(row)
        except IntegrityError as e:
            self._session.rollback()
            raise ConstraintViolationError(str(e.orig)) from e
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StoreError(str(e)) from e
        return User.model_validate(row, from_attributes=True)

    def find_by_id(self, user_id: int) -> User | None:
        row = self._run(lambda: self._session.get(UserTable, user_id))
        return self._to_entity(row)

    def find_by_email(self, email: str) -> User | None:
        return self._first(select(UserTable).where(UserTable.email == email))

    def find_by_phone(self, phone: str) -> User | None:
        return self._first(select(UserTable).where(UserTable.phone == phone))

    def exists_by_id(self, user_id: int) -> bool:
        return self.find_by_id(user_id) is not None

    def delete(self, user: User) -> None:
        """Delete the given record; a record that is already gone is a no-op."""
        if user.id is not None:
            self.delete_by_id(user.id)

    def delete_by_id(self, user_id: int) -> int:
        return self._delete_where(select(UserTable).where(UserTable.id == user_id))

    def delete_by_email(self, email: str) -> int:
        return self._delete_where(select(UserTable).where(UserTable.email == email))

    def delete_by_phone(self, phone: str) -> int:
        return self._delete_where(select(UserTable).where(UserTable.phone == phone))

    def _first(self, statement) -> User | None:
        row = self._run(lambda: self._session.exec(statement).first())
        return self._to_entity(row)

    def _delete_where(self, statement) -> int:
        """Delete every row matched by ``statement`` and return how many went."""
        try:
            rows = self._session.exec(statement).all()
            for row in rows:
                self._session.delete(row)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StoreError(str(e)) from e
        if rows:
            logger.debug("Deleted {} user row(s)", len(rows))
        return len(rows)

    def _run(self, query):
        try:
            return query()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StoreError(str(e)) from e

    @staticmethod
    def _to_entity(row: UserTable | None) -> User | None:
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)
