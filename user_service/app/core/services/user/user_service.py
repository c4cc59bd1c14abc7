"""User account business operations over the user repository."""

import re

from loguru import logger

from user_service.app.core.services.security.password_hasher import PasswordHasher
from user_service.app.core.services.user.results import (
    Err,
    Ok,
    Result,
    UserErrorKind,
)
from user_service.app.entities.core.user import (
    ConstraintViolationError,
    RepositoryError,
    SelectorKind,
    User,
    UserRepository,
    UserUpdate,
)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_ID_MIN, _ID_MAX = -(2**31), 2**31 - 1

_SELECTOR_LABELS = {
    SelectorKind.ID: "ID",
    SelectorKind.EMAIL: "e-mail",
    SelectorKind.PHONE: "telefone",
}


def not_found_message(kind: SelectorKind, value: object) -> str:
    return f"Usuário com {_SELECTOR_LABELS[kind]} {value} não encontrado."


def parse_selector(kind: SelectorKind | str) -> Result[SelectorKind]:
    try:
        return Ok(SelectorKind(kind))
    except ValueError:
        return Err.of(UserErrorKind.INVALID_SELECTOR, f"Tipo de busca inválido: {kind}")


def parse_user_id(value: int | str) -> Result[int]:
    """Parse a decimal 32-bit identifier; anything else is an invalid selector."""
    if isinstance(value, int):
        user_id = value
    elif _ID_PATTERN.fullmatch(value):
        user_id = int(value)
    else:
        return Err.of(UserErrorKind.INVALID_SELECTOR, f"ID inválido: {value!r}")

    if not _ID_MIN <= user_id <= _ID_MAX:
        return Err.of(UserErrorKind.INVALID_SELECTOR, f"ID fora do intervalo: {value}")
    return Ok(user_id)


class UserService:
    """Business operations on user accounts.

    Passwords are hashed here and nowhere else, on create and whenever an
    update supplies a new password. Each call runs synchronously against the
    store; concurrent updates to the same id are last-writer-wins.
    """

    def __init__(self, repository: UserRepository, password_hasher: PasswordHasher) -> None:
        self._repository = repository
        self._password_hasher = password_hasher

    def create(self, user: User) -> Result[User]:
        """Hash the submitted password and persist a new user.

        Any client-supplied id is discarded; the store assigns one.
        """
        try:
            digest = self._password_hasher.hash(user.password_hash)
            saved = self._repository.save(
                user.model_copy(update={"id": None, "password_hash": digest})
            )
        except ConstraintViolationError as e:
            logger.warning("Rejected user creation: constraint violation")
            return Err.of(UserErrorKind.DUPLICATE_EMAIL, str(e))
        except (RepositoryError, ValueError) as e:
            logger.exception("User creation failed")
            return Err.of(UserErrorKind.UNHANDLED, str(e))

        logger.info("Created user {}", saved.id)
        return Ok(saved)

    def find(self, value: str, kind: SelectorKind | str) -> Result[User]:
        """Resolve a selector to exactly one user."""
        selector = parse_selector(kind)
        if isinstance(selector, Err):
            return selector

        try:
            return self._lookup(value, selector.value)
        except RepositoryError as e:
            logger.exception("User lookup failed")
            return Err.of(UserErrorKind.UNHANDLED, str(e))

    def delete(self, value: str, kind: SelectorKind | str) -> Result[None]:
        """Delete the user matched by the selector.

        E-mail and phone selectors delete the record that was found rather
        than deleting by criteria, so a miss is always reported.
        """
        selector = parse_selector(kind)
        if isinstance(selector, Err):
            return selector

        try:
            if selector.value is SelectorKind.ID:
                user_id = parse_user_id(value)
                if isinstance(user_id, Err):
                    return user_id
                if not self._repository.exists_by_id(user_id.value):
                    return self._not_found(SelectorKind.ID, user_id.value)
                self._repository.delete_by_id(user_id.value)
                logger.info("Deleted user {}", user_id.value)
                return Ok(None)

            found = self._lookup(value, selector.value)
            if isinstance(found, Err):
                return found
            self._repository.delete(found.value)
        except RepositoryError as e:
            logger.exception("User deletion failed")
            return Err.of(UserErrorKind.UNHANDLED, str(e))

        logger.info("Deleted user {}", found.value.id)
        return Ok(None)

    def update(self, user_id: int | str, changes: UserUpdate) -> Result[User]:
        """Overlay the non-null fields of ``changes`` onto the stored user."""
        parsed = parse_user_id(user_id)
        if isinstance(parsed, Err):
            return parsed

        try:
            current = self._repository.find_by_id(parsed.value)
            if current is None:
                return self._not_found(SelectorKind.ID, parsed.value)

            password_hash = current.password_hash
            if changes.password_hash is not None:
                password_hash = self._password_hasher.hash(changes.password_hash)

            merged = User(
                id=current.id,
                name=changes.name if changes.name is not None else current.name,
                email=changes.email if changes.email is not None else current.email,
                phone=changes.phone if changes.phone is not None else current.phone,
                password_hash=password_hash,
            )
            saved = self._repository.save(merged)
        except ConstraintViolationError as e:
            logger.warning("Rejected update of user {}: constraint violation", parsed.value)
            return Err.of(UserErrorKind.DUPLICATE_EMAIL, str(e))
        except (RepositoryError, ValueError) as e:
            logger.exception("Update of user {} failed", parsed.value)
            return Err.of(UserErrorKind.UNHANDLED, str(e))

        logger.info("Updated user {}", saved.id)
        return Ok(saved)

    def _lookup(self, value: str, selector: SelectorKind) -> Result[User]:
        if selector is SelectorKind.ID:
            user_id = parse_user_id(value)
            if isinstance(user_id, Err):
                return user_id
            user = self._repository.find_by_id(user_id.value)
        elif selector is SelectorKind.EMAIL:
            user = self._repository.find_by_email(value)
        else:
            user = self._repository.find_by_phone(value)

        if user is None:
            return self._not_found(selector, value)
        return Ok(user)

    @staticmethod
    def _not_found(selector: SelectorKind, value: object) -> Err:
        # The searched value may be an e-mail or phone; only the selector is logged
        logger.info("No user matched selector {}", selector.name)
        return Err.of(UserErrorKind.NOT_FOUND, not_found_message(selector, value))
