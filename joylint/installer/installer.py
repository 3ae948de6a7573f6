"""Install missing development dependencies through the project's package manager."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import structlog

from joylint.installer.manifest import load_snapshot
from joylint.installer.models import DependencyDescriptor, PackageManager
from joylint.installer.plan import build_install_args, plan_installation
from joylint.process import run_command

log = structlog.get_logger("joylint.installer")


def install_dependencies(
    manager: PackageManager | str,
    cwd: str | Path,
    dependencies: Iterable[DependencyDescriptor],
    workspace: bool = False,
) -> int:
    """Install the dependencies that package.json does not already declare.

    Args:
        manager: npm, yarn or pnpm.
        cwd: Project directory holding package.json.
        dependencies: Packages to ensure, in install order.
        workspace: Treat *cwd* as a pnpm workspace root (adds ``-w``).

    Returns:
        Number of dependencies handed to the package manager (0 when
        nothing was missing, in which case no process is spawned).

    Raises:
        UnsupportedManagerError, ManifestNotFoundError, ManifestParseError,
        ExternalProcessError.
    """
    manager = PackageManager.parse(manager)
    installed = load_snapshot(cwd)
    plan = plan_installation(dependencies, installed)

    for message in plan.advisories:
        log.warning("installer.already_installed", advice=message)

    if not plan.pending:
        log.info("installer.up_to_date", cwd=str(cwd))
        return 0

    args = build_install_args(manager, plan.specs, workspace)
    log.info("installer.run", manager=manager.value, specs=plan.specs, cwd=str(cwd))
    run_command([manager.value, *args], cwd=cwd)
    return len(plan)
