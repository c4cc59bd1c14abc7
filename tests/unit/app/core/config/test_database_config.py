import os
from pathlib import Path
from unittest.mock import patch

import pytest

from user_service.app.runtime.config.config_data import DatabaseConfig


class TestDatabaseConfig:
    def test_url_used_as_is(self):
        config = DatabaseConfig(url="postgresql://app:secret@db:5432/usuarios")

        assert config.password == "secret"
        assert config.connection_string == "postgresql://app:secret@db:5432/usuarios"

    def test_password_from_env_var(self):
        config = DatabaseConfig(url="postgresql://app@db:5432/usuarios", password_env_var="DB_PW")

        with patch.dict(os.environ, {"DB_PW": "from-env"}):
            assert config.connection_string == "postgresql://app:from-env@db:5432/usuarios"

    def test_missing_env_var(self):
        config = DatabaseConfig(url="postgresql://app@db/usuarios", password_env_var="DB_PW")

        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="DB_PW"):
                _ = config.password

    def test_password_file_wins(self, tmp_path: Path):
        secret = tmp_path / "pw"
        secret.write_text("from-file\n")
        config = DatabaseConfig(
            url="postgresql://app@db:5432/usuarios",
            password_file=str(secret),
            password_env_var="DB_PW",
        )

        with patch.dict(os.environ, {"DB_PW": "from-env"}):
            assert config.password == "from-file"

    def test_sqlite_detection(self):
        assert DatabaseConfig(url="sqlite://").is_sqlite
        assert not DatabaseConfig(url="postgresql://app@db/usuarios").is_sqlite
