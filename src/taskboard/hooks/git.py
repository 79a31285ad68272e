"""Best-effort git invocation for hooks."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger("taskboard.hooks.git")

GIT_TIMEOUT = 5


def run_git(*args: str, cwd: str | Path | None = None, timeout: float = GIT_TIMEOUT) -> str:
    """Run a git command and return its stripped stdout.

    Any git failure yields an empty string.
    """
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
        logger.debug("git %s failed: %s", " ".join(args), e)
        return ""
    return result.stdout.strip()
