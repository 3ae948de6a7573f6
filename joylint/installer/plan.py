"""Pure planning helpers: which dependencies to install and how to invoke the manager."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from joylint.installer.models import DependencyDescriptor, InstallationPlan, PackageManager


def advisory_message(dep: DependencyDescriptor, installed_version: str) -> str:
    """Human-readable note for a dependency that is already present."""
    recommended = f", the recommended version is {dep.version}" if dep.version else ""
    return (
        f"Local package has installed {dep.name} with version: {installed_version}"
        f"{recommended}. Skip the install task!"
    )


def plan_installation(
    dependencies: Iterable[DependencyDescriptor],
    installed: Mapping[str, str],
) -> InstallationPlan:
    """Keep only the descriptors whose names are absent from *installed*.

    Input order is preserved. Present names are never reinstalled, even on
    a version mismatch; they produce an advisory instead.
    """
    plan = InstallationPlan()
    for dep in dependencies:
        if dep.name in installed:
            plan.advisories.append(advisory_message(dep, installed[dep.name]))
        else:
            plan.pending.append(dep)
    return plan


def build_install_args(
    manager: PackageManager | str,
    specs: list[str],
    workspace: bool = False,
) -> list[str]:
    """Build the manager-specific argument list (without the executable)."""
    manager = PackageManager.parse(manager)

    if manager is PackageManager.YARN:
        return ["add", "-D", *specs, "--verbose"]
    if manager is PackageManager.PNPM:
        args = ["add", "-D", *specs]
        if workspace:
            args.insert(1, "-w")
        return args
    return ["install", "-D", *specs, "--no-audit", "--loglevel", "error", "--verbose"]
