"""CLI entry point: joylint.

Subcommands:
    joylint install eslint@8.0.0 prettier     # install what package.json lacks
    joylint lint --framework react            # lint tool set for a framework
    joylint hooks                             # husky + lint-staged commit hooks
    joylint init --framework vue3             # lint + hooks
    joylint control release v1.2.0            # dev | build | tag | deltag | release
"""

from __future__ import annotations

import functools
import sys
from pathlib import Path

import click
import structlog

from joylint.control.commands import ReleaseController
from joylint.core.config import load_control_config
from joylint.core.logging import setup_logging
from joylint.exceptions import JoylintError
from joylint.hooks.bootstrap import completion_message, setup_hooks, setup_lint_packages
from joylint.installer.detector import detect_manager, detect_workspace
from joylint.installer.installer import install_dependencies
from joylint.installer.models import DependencyDescriptor, PackageManager
from joylint.installer.presets import FRAMEWORKS
from joylint.prompt import get_chooser

log = structlog.get_logger("joylint.cli")


def _handle_errors(func):
    """Report JoylintError on stderr and exit with its status."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except JoylintError as e:
            log.error("cli.failed", error=str(e), kind=type(e).__name__)
            click.secho(f"Error: {e}", err=True, fg="red")
            sys.exit(e.exit_code)

    return wrapper


def _interactive(yes: bool) -> bool:
    return not yes and sys.stdin.isatty()


def _resolve_manager(cwd: Path, manager: str | None, yes: bool) -> PackageManager:
    if manager:
        return PackageManager.parse(manager)
    detected = detect_manager(cwd)
    if not _interactive(yes):
        return detected
    answer = get_chooser().choose(
        "Which package manager?", [m.value for m in PackageManager], default=detected.value
    )
    return PackageManager.parse(answer)


def _resolve_framework(framework: str | None, yes: bool) -> str:
    if framework:
        return framework
    if not _interactive(yes):
        return "none"
    return get_chooser().choose("Which frontend framework?", FRAMEWORKS, default="none")


def _resolve_workspace(cwd: Path, manager: PackageManager, workspace: bool | None) -> bool:
    if workspace is not None:
        return workspace
    return detect_workspace(cwd, manager)


def _project_options(func):
    """Options shared by the dependency-installing commands."""
    func = click.option(
        "--yes", "-y", is_flag=True, help="Never prompt; use detected defaults"
    )(func)
    func = click.option(
        "--workspace/--no-workspace",
        default=None,
        help="Install at a pnpm workspace root (default: detect pnpm-workspace.yaml)",
    )(func)
    func = click.option(
        "--manager",
        "-m",
        default=None,
        help="npm | yarn | pnpm (default: $JOYLINT_MANAGER or detect from lockfile)",
    )(func)
    func = click.option(
        "--cwd",
        type=click.Path(exists=True, file_okay=False),
        default=".",
        help="Project directory",
    )(func)
    return func


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """Joylint: lint tooling bootstrap and release helpers for frontend projects."""
    setup_logging("DEBUG" if verbose else None)


@main.command("install")
@click.argument("specs", nargs=-1)
@_project_options
@_handle_errors
def install(
    specs: tuple[str, ...], cwd: str, manager: str | None, workspace: bool | None, yes: bool
) -> None:
    """Install SPECS (name or name@version) that package.json does not declare."""
    root = Path(cwd)
    pm = _resolve_manager(root, manager, yes)
    deps = [DependencyDescriptor.parse(s) for s in specs]
    count = install_dependencies(pm, root, deps, _resolve_workspace(root, pm, workspace))
    click.echo(f"Installed {count} dependencies.")


@main.command("lint")
@click.option("--framework", "-f", default=None, help="react | vue2 | vue3 | none")
@_project_options
@_handle_errors
def lint(
    framework: str | None, cwd: str, manager: str | None, workspace: bool | None, yes: bool
) -> None:
    """Install the lint tool set for a frontend framework."""
    root = Path(cwd)
    pm = _resolve_manager(root, manager, yes)
    fw = _resolve_framework(framework, yes)
    count = setup_lint_packages(pm, root, fw, _resolve_workspace(root, pm, workspace))
    click.secho(completion_message(count, "Init lint tools"), fg="green")


@main.command("hooks")
@_project_options
@_handle_errors
def hooks(cwd: str, manager: str | None, workspace: bool | None, yes: bool) -> None:
    """Install husky + lint-staged and register the commit hooks."""
    root = Path(cwd)
    pm = _resolve_manager(root, manager, yes)
    count = setup_hooks(pm, root, _resolve_workspace(root, pm, workspace))
    click.secho(completion_message(count, "Init Git process"), fg="green")


@main.command("init")
@click.option("--framework", "-f", default=None, help="react | vue2 | vue3 | none")
@_project_options
@_handle_errors
def init(
    framework: str | None, cwd: str, manager: str | None, workspace: bool | None, yes: bool
) -> None:
    """Install lint tools, then set up commit hooks."""
    root = Path(cwd)
    pm = _resolve_manager(root, manager, yes)
    fw = _resolve_framework(framework, yes)
    ws = _resolve_workspace(root, pm, workspace)
    count = setup_lint_packages(pm, root, fw, ws)
    count += setup_hooks(pm, root, ws)
    click.secho(completion_message(count, "Init"), fg="green")


@main.command("control", context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--cwd", type=click.Path(exists=True, file_okay=False), default=".", help="Project directory"
)
@click.option("--config", "config_path", default=None, help="Control config JSON (default: configs/env.json)")
@_handle_errors
def control(args: tuple[str, ...], cwd: str, config_path: str | None) -> None:
    """Run a release verb: dev, build [--analysis], tag [NAME], deltag --all|NAMES, release [NAME]."""
    root = Path(cwd)
    config = load_control_config(root, config_path)
    controller = ReleaseController(root, config)
    chooser = get_chooser() if not args else None
    controller.dispatch(list(args), chooser)


if __name__ == "__main__":
    main()
