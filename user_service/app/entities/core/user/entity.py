"""User domain entity."""

from enum import Enum

from pydantic import AliasChoices, BaseModel, Field

# Clients may send the password as ``password`` or ``password_hash``; it holds
# plaintext until the service replaces it with a digest.
_PASSWORD_ALIASES = AliasChoices("password_hash", "password")


class SelectorKind(str, Enum):
    """Field a lookup or delete matches on."""

    ID = "ID"
    EMAIL = "EMAIL"
    PHONE = "TELEFONE"

    @classmethod
    def _missing_(cls, value: object) -> "SelectorKind | None":
        if not isinstance(value, str):
            return None
        normalized = value.strip().upper()
        if normalized == "PHONE":
            return cls.PHONE
        for member in cls:
            if member.value == normalized:
                return member
        return None


class User(BaseModel):
    """User account as stored and returned by the API.

    ``id`` is assigned by the store and is ``None`` until the first save.
    """

    id: int | None = Field(default=None, description="Store-generated identifier")
    name: str = Field(description="User's name")
    email: str = Field(description="User's e-mail address (unique)")
    phone: str = Field(description="User's phone number")
    password_hash: str = Field(
        validation_alias=_PASSWORD_ALIASES,
        description="Password digest (plaintext only on create input)",
    )


class UserUpdate(BaseModel):
    """Partial update payload; ``None`` keeps the stored value."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    password_hash: str | None = Field(default=None, validation_alias=_PASSWORD_ALIASES)
