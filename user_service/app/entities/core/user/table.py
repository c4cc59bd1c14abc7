"""User database table model."""

from sqlmodel import Field, SQLModel


class UserTable(SQLModel, table=True):
    """Database persistence model for users.

    One row per account, keyed by a store-generated integer. ``email`` carries
    the only uniqueness constraint; ``phone`` is indexed for lookups but may
    repeat.
    """

    __tablename__ = "usuarios"

    id: int | None = Field(default=None, primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)
    phone: str = Field(index=True)
    password_hash: str
