"""Command execution wrapper."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

logger = logging.getLogger("wcr.executor")

# Keep tool messages untranslated so they can be matched and reported as-is.
_COMMAND_ENV = {"LC_MESSAGES": "C"}


def run_command(command: list[str], cwd: Path | None = None) -> tuple[int, str, str]:
    """Run command and return (exit_code, stdout, stderr).

    A missing executable is reported as exit code 127 with the OS error on
    stderr, like a shell would.
    """
    logger.debug("running: %s", " ".join(command))
    try:
        proc = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            env={**os.environ, **_COMMAND_ENV},
        )
    except FileNotFoundError as exc:
        return 127, "", str(exc)
    return proc.returncode, proc.stdout, proc.stderr
