"""Console.log and ecosystem-file checks."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from taskboard.hooks.git import run_git

SOURCE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")
ECOSYSTEM_DIRS = ("agents", "rules", "skills", "hooks")

_CONSOLE_LOG_RE = re.compile(r"console\.log\s*\(")


def count_console_log(path: str | Path) -> int:
    """Number of console.log calls in a file; 0 if it cannot be read."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return 0
    return len(_CONSOLE_LOG_RE.findall(content))


def modified_source_files(cwd: str | Path | None = None) -> list[str]:
    """JS/TS files added, copied or modified relative to HEAD."""
    globs = [f"*{ext}" for ext in SOURCE_EXTENSIONS]
    output = run_git("diff", "HEAD", "--name-only", "--diff-filter=ACM", "--", *globs, cwd=cwd)
    return [line for line in output.splitlines() if line]


def check_modified_files(cwd: str | Path | None = None) -> str | None:
    """Report console.log counts across modified files, or None when clean."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    warnings = []
    for name in modified_source_files(cwd):
        count = count_console_log(base / name)
        if count > 0:
            warnings.append(f"  {name}: {count} console.log(s)")
    if not warnings:
        return None
    return (
        "\nConsole.log detected in modified files:\n"
        + "\n".join(warnings)
        + "\nConsider removing before commit.\n"
    )


def file_path_from_event(raw: str) -> str | None:
    """Extract ``tool_input.file_path`` from a hook event; None if absent or malformed."""
    try:
        data: Any = json.loads(raw)
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    tool_input = data.get("tool_input")
    if not isinstance(tool_input, dict):
        return None
    file_path = tool_input.get("file_path")
    return str(file_path) if file_path else None


def warn_on_edit(file_path: str) -> str | None:
    """Warning for an edited JS/TS file that still contains console.log."""
    if not file_path.endswith(SOURCE_EXTENSIONS):
        return None
    path = Path(file_path).resolve()
    if not path.is_file():
        return None
    count = count_console_log(path)
    if count == 0:
        return None
    return f"File contains {count} console.log statement(s). Consider removing."


def ecosystem_reminder(file_path: str, home: str | Path | None = None) -> str | None:
    """Reminder to commit when a file under ~/.claude/{agents,rules,skills,hooks} changed."""
    claude_dir = Path(home if home is not None else Path.home()) / ".claude"
    target = Path(file_path).resolve()
    for name in ECOSYSTEM_DIRS:
        if target.is_relative_to((claude_dir / name).resolve()):
            relative = target.relative_to(claude_dir.resolve())
            return (
                f"\nEcosystem file modified: {relative}\n"
                "Remember to commit changes in your ecosystem repo.\n"
            )
    return None
