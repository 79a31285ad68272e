"""Save working state before the agent's context is compacted."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from taskboard.hooks.git import run_git

logger = logging.getLogger("taskboard.hooks.compact")

STATE_DIR = ".claude"
STATE_FILE = "compact-state.json"
RESTORE_HINT = (
    "State saved to .claude/compact-state.json. "
    "After compaction, read this file to restore context."
)


def collect_state(cwd: str | Path | None = None) -> dict[str, Any]:
    """Snapshot of branch, status, last commit and modified files."""
    return {
        "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
        "branch": run_git("branch", "--show-current", cwd=cwd),
        "status": run_git("status", "--short", cwd=cwd),
        "lastCommit": run_git("log", "-1", "--oneline", cwd=cwd),
        "modifiedFiles": [
            line for line in run_git("diff", "--name-only", cwd=cwd).splitlines() if line
        ],
    }


def save_compact_state(cwd: str | Path | None = None) -> Path:
    """Write the state snapshot to ``.claude/compact-state.json``.

    Returns:
        Path of the written file
    """
    base = Path(cwd) if cwd is not None else Path.cwd()
    state_dir = base / STATE_DIR
    state_dir.mkdir(parents=True, exist_ok=True)
    out_path = state_dir / STATE_FILE
    out_path.write_text(json.dumps(collect_state(cwd), indent=2), encoding="utf-8")
    logger.debug("Saved compact state to %s", out_path)
    return out_path
