import pytest
from sqlalchemy import inspect
from typer.testing import CliRunner

from user_service.app.core.services import DbSessionService
from user_service.app.runtime.config.config_data import ConfigData, DatabaseConfig
from user_service.app.runtime.context import with_context
from user_service.cli import app

runner = CliRunner()


@pytest.fixture
def db_config(tmp_path) -> ConfigData:
    return ConfigData(database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'cli.db'}"))


def _tables(config: ConfigData) -> list[str]:
    service = DbSessionService(config.database, "test")
    try:
        return inspect(service.engine).get_table_names()
    finally:
        service.dispose()


class TestInitDb:
    def test_creates_tables(self, db_config: ConfigData):
        with with_context(db_config):
            result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0, result.output
        assert "Database initialized" in result.output
        assert "usuarios" in _tables(db_config)

    def test_drop_requires_confirmation(self, db_config: ConfigData):
        with with_context(db_config):
            result = runner.invoke(app, ["init-db", "--drop"], input="n\n")

        assert result.exit_code == 1
        assert "Aborted" in result.output

    def test_drop_with_yes(self, db_config: ConfigData):
        with with_context(db_config):
            runner.invoke(app, ["init-db"])
            result = runner.invoke(app, ["init-db", "--drop", "--yes"])

        assert result.exit_code == 0, result.output
        assert "usuarios" in _tables(db_config)


class TestCheckDb:
    def test_healthy(self, db_config: ConfigData):
        with with_context(db_config):
            result = runner.invoke(app, ["check-db"])

        assert result.exit_code == 0, result.output
        assert "sqlite" in result.output
        assert "healthy" in result.output

    def test_unreachable(self, tmp_path):
        missing = ConfigData(
            database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'no' / 'such' / 'dir.db'}")
        )
        with with_context(missing):
            result = runner.invoke(app, ["check-db"])

        assert result.exit_code == 1
        assert "unhealthy" in result.output
