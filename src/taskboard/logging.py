"""Logging setup shared by the MCP server and the hooks CLI.

Records go to a rotating file and, optionally, to stderr. stdout is left
alone because the stdio tool transport owns it.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER = "taskboard"

LOG_DIR_ENV = "TASKBOARD_LOG_DIR"
LOG_LEVEL_ENV = "TASKBOARD_LOG_LEVEL"

DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_FILE = "taskboard.log"
DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5MB
DEFAULT_BACKUP_COUNT = 3
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Applied in order; the bearer rule must run before the generic token rule
_SECRET_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"sk_(live|test)_[a-zA-Z0-9]+"), "[API_KEY]"),
    (re.compile(r"Bearer [a-zA-Z0-9._-]+"), "Bearer [REDACTED]"),
    (re.compile(r"token=[a-zA-Z0-9._-]+"), "token=[REDACTED]"),
    (re.compile(r"(api[_-]?key=)[a-zA-Z0-9._-]+"), r"\1[REDACTED]"),
)


def _resolve_level(level: str | None) -> tuple[str, int]:
    name = (level or os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    return name, getattr(logging, name, logging.INFO)


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Configure the ``taskboard`` logger.

    Safe to call more than once: previous handlers are replaced.

    Args:
        log_dir: Directory for the log file. Falls back to TASKBOARD_LOG_DIR,
            then ./logs.
        log_file: File name inside log_dir.
        max_bytes: Rotation threshold.
        backup_count: Rotated files kept.
        level: Level name. Falls back to TASKBOARD_LOG_LEVEL, then INFO.
        console: Also log to stderr.

    Returns:
        The configured ``taskboard`` logger.
    """
    if log_dir is None:
        log_dir = os.environ.get(LOG_DIR_ENV, DEFAULT_LOG_DIR)
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    level_name, log_level = _resolve_level(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    log_path = directory / log_file
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    ]
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s at %s", log_path, level_name)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a component, e.g. ``get_logger("sources.rest")``."""
    prefix = f"{ROOT_LOGGER}."
    return logging.getLogger(name if name.startswith(prefix) else prefix + name)


def truncate_output(output: str, max_length: int = 2000) -> str:
    """Cut long response bodies before they are logged."""
    if len(output) <= max_length:
        return output
    return f"{output[:max_length]}\n... [truncated, {len(output) - max_length} more chars]"


def sanitize_for_log(text: str) -> str:
    """Redact API keys and bearer tokens."""
    for pattern, replacement in _SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text
