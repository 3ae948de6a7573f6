"""Synchronous subprocess helpers.

Commands run to completion with no timeout. ``run_command`` inherits the
caller's stdio so tool output streams straight to the terminal.
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from pathlib import Path

import structlog

from joylint.exceptions import ExternalProcessError

log = structlog.get_logger("joylint.process")


def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> None:
    """Run *cmd* with inherited stdio, raising ExternalProcessError on non-zero exit.

    *env*, when given, is the complete environment of the child.
    """
    log.debug("process.run", cmd=cmd, cwd=str(cwd) if cwd else None)
    try:
        proc = subprocess.run(cmd, cwd=cwd, env=dict(env) if env is not None else None)
    except FileNotFoundError as e:
        # 127 is what a shell reports for a missing executable
        raise ExternalProcessError(cmd, 127) from e
    if proc.returncode != 0:
        raise ExternalProcessError(cmd, proc.returncode)


def capture_output(cmd: list[str], cwd: str | Path | None = None) -> str:
    """Run *cmd* and return its stripped stdout."""
    log.debug("process.capture", cmd=cmd, cwd=str(cwd) if cwd else None)
    try:
        proc = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise ExternalProcessError(cmd, 127) from e
    if proc.returncode != 0:
        log.error("process.capture_failed", cmd=cmd, stderr=proc.stderr.strip())
        raise ExternalProcessError(cmd, proc.returncode)
    return proc.stdout.strip()
