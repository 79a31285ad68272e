"""Unit tests for settings loading."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from taskboard.config import DEFAULT_DATABASE_URL, ConfigError, Settings, load_settings

CONFIG_VARS = (
    "MCP_API_URL",
    "MCP_API_KEY",
    "MCP_BOARD_ID",
    "DATABASE_URL",
    "MCP_HTTP_TIMEOUT",
    "TASKBOARD_ENV_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from the caller's environment and any .env on disk."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.mark.unit
class TestSettings:
    """Tests for the Settings dataclass."""

    def test_rest_mode_requires_url_and_key(self) -> None:
        assert Settings(api_url="https://x", api_key="k").use_rest_api
        assert not Settings(api_url="https://x").use_rest_api
        assert not Settings(api_key="k").use_rest_api

    def test_api_base_appends_prefix(self) -> None:
        assert Settings(api_url="https://x/", api_key="k").api_base == "https://x/api/v1"

    def test_api_base_without_url(self) -> None:
        with pytest.raises(ConfigError):
            _ = Settings().api_base


@pytest.mark.unit
class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self) -> None:
        settings = load_settings()

        assert not settings.use_rest_api
        assert settings.default_board_id == ""
        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.http_timeout == 30.0

    def test_reads_environment(self) -> None:
        env = {
            "MCP_API_URL": "https://app.example.com",
            "MCP_API_KEY": "sk_live_1",
            "MCP_BOARD_ID": "b1",
            "DATABASE_URL": "postgresql://db/board",
            "MCP_HTTP_TIMEOUT": "5",
        }
        with patch.dict(os.environ, env):
            settings = load_settings()

        assert settings.use_rest_api
        assert settings.default_board_id == "b1"
        assert settings.database_url == "postgresql://db/board"
        assert settings.http_timeout == 5.0

    def test_loads_env_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir, patch.dict(os.environ):
            env_file = Path(tmpdir) / "board.env"
            env_file.write_text("MCP_BOARD_ID=from-file\n")

            settings = load_settings(env_file)

        assert settings.default_board_id == "from-file"
        assert "MCP_BOARD_ID" not in os.environ

    def test_env_file_does_not_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MCP_BOARD_ID", "from-env")
        with tempfile.TemporaryDirectory() as tmpdir:
            env_file = Path(tmpdir) / "board.env"
            env_file.write_text("MCP_BOARD_ID=from-file\n")

            assert load_settings(env_file).default_board_id == "from-env"

    def test_missing_env_file(self) -> None:
        with pytest.raises(ConfigError):
            load_settings("/nonexistent/board.env")

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_timeout(self, value: str) -> None:
        with patch.dict(os.environ, {"MCP_HTTP_TIMEOUT": value}), pytest.raises(ConfigError):
            load_settings()
