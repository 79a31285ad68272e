"""Environment-driven configuration for the board tool server."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///board.db"
DEFAULT_HTTP_TIMEOUT = 30.0
API_PREFIX = "/api/v1"


class ConfigError(Exception):
    """Raised when configuration values are invalid."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the board tool server.

    Remote-API mode is active only when both ``api_url`` and ``api_key`` are set;
    otherwise reads go straight to the database at ``database_url``.
    """

    api_url: str | None = None
    api_key: str | None = None
    default_board_id: str = ""
    database_url: str = DEFAULT_DATABASE_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    @property
    def use_rest_api(self) -> bool:
        return bool(self.api_url and self.api_key)

    @property
    def api_base(self) -> str:
        """Base URL all REST paths are joined onto."""
        if not self.api_url:
            raise ConfigError("MCP_API_URL is not configured")
        return self.api_url.rstrip("/") + API_PREFIX


def load_env_file(env_file: str | Path | None = None) -> Path | None:
    """Load a dotenv file into the process environment.

    Precedence: explicit argument, then TASKBOARD_ENV_FILE, then the nearest
    ``.env`` found walking up from the working directory. Existing environment
    variables are never overridden.

    Returns:
        Path of the loaded file, or None when nothing was found.
    """
    candidate = env_file or os.environ.get("TASKBOARD_ENV_FILE")
    if candidate:
        path = Path(candidate).expanduser()
        if not path.is_file():
            raise ConfigError(f"Env file not found: {path}")
    else:
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        path = Path(found)

    load_dotenv(path, override=False)
    return path


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build Settings from the environment (after loading dotenv).

    Raises:
        ConfigError: If MCP_HTTP_TIMEOUT is not a positive number.
    """
    load_env_file(env_file)

    raw_timeout = os.environ.get("MCP_HTTP_TIMEOUT", "").strip()
    timeout = DEFAULT_HTTP_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"MCP_HTTP_TIMEOUT must be a number, got {raw_timeout!r}") from e
        if timeout <= 0:
            raise ConfigError(f"MCP_HTTP_TIMEOUT must be positive, got {raw_timeout!r}")

    return Settings(
        api_url=os.environ.get("MCP_API_URL") or None,
        api_key=os.environ.get("MCP_API_KEY") or None,
        default_board_id=os.environ.get("MCP_BOARD_ID", ""),
        database_url=os.environ.get("DATABASE_URL") or DEFAULT_DATABASE_URL,
        http_timeout=timeout,
    )
