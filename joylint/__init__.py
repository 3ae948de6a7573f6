"""Joylint: lint tooling bootstrapper and release helpers for frontend projects."""

__version__ = "0.1.0"

from joylint.installer import (
    DependencyDescriptor,
    InstallationPlan,
    PackageManager,
    install_dependencies,
    plan_installation,
)

__all__ = [
    "DependencyDescriptor",
    "InstallationPlan",
    "PackageManager",
    "install_dependencies",
    "plan_installation",
]
