"""Dependency installer — install only what package.json is missing."""

from joylint.installer.detector import detect_manager, detect_workspace
from joylint.installer.installer import install_dependencies
from joylint.installer.manifest import installed_dependencies, load_snapshot, read_manifest
from joylint.installer.models import DependencyDescriptor, InstallationPlan, PackageManager
from joylint.installer.plan import build_install_args, plan_installation

__all__ = [
    "DependencyDescriptor",
    "InstallationPlan",
    "PackageManager",
    "build_install_args",
    "detect_manager",
    "detect_workspace",
    "install_dependencies",
    "installed_dependencies",
    "load_snapshot",
    "plan_installation",
    "read_manifest",
]
