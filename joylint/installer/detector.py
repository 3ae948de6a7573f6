"""Package manager detection from lockfile marker files."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from joylint.installer.models import PackageManager

log = structlog.get_logger("joylint.installer")

# (marker_file, manager), ordered by priority
DETECTION_RULES: list[tuple[str, PackageManager]] = [
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("package-lock.json", PackageManager.NPM),
]

WORKSPACE_MARKER = "pnpm-workspace.yaml"


def detect_manager(cwd: str | Path) -> PackageManager:
    """Pick the manager whose lockfile is present; npm when none is.

    ``JOYLINT_MANAGER`` takes precedence over lockfiles.
    """
    from_env = os.environ.get("JOYLINT_MANAGER")
    if from_env:
        return PackageManager.parse(from_env)

    root = Path(cwd)
    for marker_file, manager in DETECTION_RULES:
        if (root / marker_file).exists():
            log.debug("installer.detected_manager", manager=manager.value, marker=marker_file)
            return manager
    return PackageManager.NPM


def detect_workspace(cwd: str | Path, manager: PackageManager) -> bool:
    """True for a pnpm project whose root declares a workspace."""
    return manager is PackageManager.PNPM and (Path(cwd) / WORKSPACE_MARKER).exists()
