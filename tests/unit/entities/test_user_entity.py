"""Unit tests for the user entity package.

Covers the domain model, the partial-update payload, the selector enum and
the table model.
"""

import pytest
from pydantic import ValidationError
from sqlmodel import Session, select

from user_service.app.entities.core.user import SelectorKind, User, UserTable, UserUpdate


class TestUser:
    """Test the User domain entity."""

    def test_user_without_id(self):
        """A new user has no id until the store assigns one."""
        user = User(name="Ana", email="ana@x.com", phone="1", password_hash="pw")

        assert user.id is None
        assert user.name == "Ana"
        assert user.password_hash == "pw"

    def test_password_alias_accepted(self):
        """Clients may send the password under ``password``."""
        user = User.model_validate(
            {"name": "Ana", "email": "ana@x.com", "phone": "1", "password": "pw"}
        )

        assert user.password_hash == "pw"

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            User.model_validate({"name": "Ana", "email": "ana@x.com", "password": "pw"})

    def test_serialized_field_names(self):
        user = User(id=3, name="Ana", email="ana@x.com", phone="1", password_hash="digest")

        assert user.model_dump() == {
            "id": 3,
            "name": "Ana",
            "email": "ana@x.com",
            "phone": "1",
            "password_hash": "digest",
        }

    def test_users_compare_by_value(self):
        first = User(id=1, name="Ana", email="ana@x.com", phone="1", password_hash="d")
        second = User(id=1, name="Ana", email="ana@x.com", phone="1", password_hash="d")

        assert first == second
        assert first != first.model_copy(update={"phone": "2"})


class TestUserUpdate:
    def test_all_fields_optional(self):
        changes = UserUpdate()

        assert changes.name is None
        assert changes.email is None
        assert changes.phone is None
        assert changes.password_hash is None

    def test_partial_payload(self):
        changes = UserUpdate.model_validate({"phone": "2", "password": "newpw"})

        assert changes.phone == "2"
        assert changes.password_hash == "newpw"
        assert changes.name is None


class TestSelectorKind:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("ID", SelectorKind.ID),
            ("EMAIL", SelectorKind.EMAIL),
            ("TELEFONE", SelectorKind.PHONE),
            ("PHONE", SelectorKind.PHONE),
            ("email", SelectorKind.EMAIL),
            (" telefone ", SelectorKind.PHONE),
        ],
    )
    def test_accepted_spellings(self, raw: str, expected: SelectorKind):
        assert SelectorKind(raw) is expected

    @pytest.mark.parametrize("raw", ["NOME", "", "IDS", 1])
    def test_unknown_kind_rejected(self, raw):
        with pytest.raises(ValueError):
            SelectorKind(raw)


class TestUserTable:
    def test_id_generated_on_insert(self, session: Session):
        row = UserTable(name="Ana", email="ana@x.com", phone="1", password_hash="d")

        session.add(row)
        session.commit()
        session.refresh(row)

        assert isinstance(row.id, int)

    def test_duplicate_email_rejected(self, session: Session):
        from sqlalchemy.exc import IntegrityError

        session.add(UserTable(name="Ana", email="same@x.com", phone="1", password_hash="d"))
        session.commit()

        session.add(UserTable(name="Bia", email="same@x.com", phone="2", password_hash="d"))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_duplicate_phone_allowed(self, session: Session):
        session.add(UserTable(name="Ana", email="ana@x.com", phone="1", password_hash="d"))
        session.add(UserTable(name="Bia", email="bia@x.com", phone="1", password_hash="d"))
        session.commit()

        rows = session.exec(select(UserTable).where(UserTable.phone == "1")).all()
        assert len(rows) == 2

    def test_table_model_from_entity(self):
        user = User(name="Ana", email="ana@x.com", phone="1", password_hash="d")

        table = UserTable.model_validate(user, from_attributes=True)

        assert table.id is None
        assert table.email == user.email
        assert table.password_hash == user.password_hash
