"""Hooks - Advisory editor/agent event hooks for git state and file contents."""

from taskboard.hooks.checks import (
    SOURCE_EXTENSIONS,
    check_modified_files,
    count_console_log,
    ecosystem_reminder,
    file_path_from_event,
    warn_on_edit,
)
from taskboard.hooks.compact import collect_state, save_compact_state
from taskboard.hooks.git import run_git

__all__ = [
    "SOURCE_EXTENSIONS",
    "check_modified_files",
    "collect_state",
    "count_console_log",
    "ecosystem_reminder",
    "file_path_from_event",
    "run_git",
    "save_compact_state",
    "warn_on_edit",
]
