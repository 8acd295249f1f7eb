"""Unit tests for the command line interface."""

from unittest.mock import patch

from typer.testing import CliRunner

from bookshelf.cli import app
from bookshelf.runtime.config.config_data import ConfigData, DatabaseConfig
from bookshelf.runtime.context import with_context

runner = CliRunner()


class TestCli:
    """Test the bookshelf commands."""

    def test_schema_prints_sdl(self):
        """Should print the schema with its directives."""
        result = runner.invoke(app, ["schema"])

        assert result.exit_code == 0
        assert "union AuthorResponse = Author | ErrorResponse" in result.output
        assert "directive @authorize" in result.output

    def test_init_db(self):
        """Should create the tables against the configured database."""
        config = ConfigData(database=DatabaseConfig(url="sqlite+aiosqlite:///:memory:"))

        with with_context(config):
            result = runner.invoke(app, ["init-db", "--drop"])

        assert result.exit_code == 0, result.output
        assert "Database tables are ready" in result.output

    def test_serve_uses_config_defaults(self):
        """Should hand the configured host and port to uvicorn."""
        with patch("uvicorn.run") as run:
            result = runner.invoke(app, ["serve", "--port", "9001"])

        assert result.exit_code == 0, result.output
        args, kwargs = run.call_args
        assert args == ("bookshelf.api.http.app:app",)
        assert kwargs["port"] == 9001
        assert kwargs["reload"] is False
