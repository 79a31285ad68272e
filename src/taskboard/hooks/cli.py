"""CLI entry point for the event hooks.

Each command prints advisory text for the agent and always exits 0.
"""

from __future__ import annotations

import click

from taskboard.hooks.checks import (
    check_modified_files,
    ecosystem_reminder,
    file_path_from_event,
    warn_on_edit,
)
from taskboard.hooks.compact import RESTORE_HINT, save_compact_state


def _read_event() -> str | None:
    """File path from the hook event on stdin."""
    return file_path_from_event(click.get_text_stream("stdin").read())


@click.group()
@click.version_option(package_name="taskboard-mcp")
def main() -> None:
    """Advisory hooks for git state and file contents."""
    pass


@main.command("check-console-log")
def check_console_log() -> None:
    """Warn about console.log in files modified since HEAD."""
    report = check_modified_files()
    if report:
        click.echo(report, nl=False)


@main.command("warn-console-log-on-edit")
def warn_console_log_on_edit() -> None:
    """Warn when an edited JS/TS file contains console.log."""
    file_path = _read_event()
    if not file_path:
        return
    message = warn_on_edit(file_path)
    if message:
        click.echo(message, nl=False)


@main.command("ecosystem-reminder")
def ecosystem_reminder_command() -> None:
    """Remind to commit edits to global agent/rule/skill/hook files."""
    file_path = _read_event()
    if not file_path:
        return
    message = ecosystem_reminder(file_path)
    if message:
        click.echo(message, nl=False)


@main.command("pre-compact-save")
def pre_compact_save() -> None:
    """Save git working state before context compaction."""
    try:
        save_compact_state()
    except OSError as e:
        click.echo(f"Failed to save compact state: {e}", err=True)
        return
    click.echo(RESTORE_HINT, nl=False)


if __name__ == "__main__":
    main()
