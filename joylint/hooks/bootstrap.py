"""Lint bootstrapper — install lint tools and wire up husky commit hooks."""

from __future__ import annotations

import shutil
from pathlib import Path

import structlog

from joylint.exceptions import HooksError
from joylint.installer.installer import install_dependencies
from joylint.installer.models import PackageManager
from joylint.installer.presets import HUSKY_DEPS, lint_dependencies
from joylint.process import run_command

log = structlog.get_logger("joylint.hooks")

TEMPLATES_DIR = Path(__file__).parent / "templates"

HOOK_SCRIPTS: list[str] = ["verify_commit_msg.mjs", "lint_staged.mjs"]

JOYLINT_DIR = ".joylint"
HUSKY_DIR = ".husky"


def completion_message(installed: int, task: str) -> str:
    """Final status line for a bootstrap task."""
    detail = "Already up-to-date." if installed == 0 else "All tasks are already done."
    return f"[JOYLINT] {task} success {detail}"


def setup_lint_packages(
    manager: PackageManager | str,
    cwd: str | Path,
    framework: str | None,
    workspace: bool = False,
) -> int:
    """Install the lint tool set for *framework*; returns the install count."""
    deps = lint_dependencies(framework)
    log.info("hooks.lint_packages", framework=framework or "none", count=len(deps))
    return install_dependencies(manager, cwd, deps, workspace)


def _ensure_dir(path: Path) -> None:
    if not path.exists():
        log.info("hooks.create_dir", path=str(path))
        path.mkdir(parents=True)
    elif not path.is_dir():
        log.error("hooks.not_a_directory", path=str(path))
        raise HooksError(f"{path} exists and is not a directory")


def copy_hook_scripts(joylint_dir: Path, templates_dir: Path = TEMPLATES_DIR) -> list[Path]:
    """Replace the hook scripts in *joylint_dir* with fresh template copies."""
    copied: list[Path] = []
    for name in HOOK_SCRIPTS:
        target = joylint_dir / name
        target.unlink(missing_ok=True)
        shutil.copyfile(templates_dir / name, target)
        copied.append(target)
    return copied


def setup_hooks(
    manager: PackageManager | str,
    cwd: str | Path,
    workspace: bool = False,
    templates_dir: Path = TEMPLATES_DIR,
) -> int:
    """Install husky + lint-staged and register commit-msg / pre-commit hooks.

    Steps:
    1. Install HUSKY_DEPS (skipping ones package.json already has)
    2. Create .joylint/ and .husky/ when missing
    3. Copy hook script templates into .joylint/
    4. husky install, add the two hooks, set the prepare script

    Returns the number of dependencies installed.
    """
    root = Path(cwd).resolve()
    installed = install_dependencies(manager, root, HUSKY_DEPS, workspace)

    joylint_dir = root / JOYLINT_DIR
    husky_dir = root / HUSKY_DIR
    try:
        _ensure_dir(joylint_dir)
        _ensure_dir(husky_dir)
        copy_hook_scripts(joylint_dir, templates_dir)
    except OSError as e:
        log.error("hooks.write_failed", path=str(root), error=str(e))
        raise HooksError(f"Cannot write hook scripts under {root}: {e}") from e

    run_command(["npx", "husky", "install"], cwd=root)
    run_command(
        ["npx", "husky", "add", str(husky_dir / "commit-msg"),
         f"node {joylint_dir / 'verify_commit_msg.mjs'}"],
        cwd=root,
    )
    run_command(
        ["npx", "husky", "add", str(husky_dir / "pre-commit"),
         f"node {joylint_dir / 'lint_staged.mjs'}"],
        cwd=root,
    )
    # Re-run husky install after every dependency install
    run_command(["npm", "pkg", "set", "scripts.prepare=husky install"], cwd=root)

    log.info("hooks.configured", cwd=str(root), hooks=["commit-msg", "pre-commit"])
    return installed
