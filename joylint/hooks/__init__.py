"""Lint tooling bootstrap: lint dependency sets and git commit hooks."""

from joylint.hooks.bootstrap import (
    HOOK_SCRIPTS,
    completion_message,
    setup_hooks,
    setup_lint_packages,
)

__all__ = ["HOOK_SCRIPTS", "completion_message", "setup_hooks", "setup_lint_packages"]
