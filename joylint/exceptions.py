"""Custom exceptions for joylint."""

from __future__ import annotations


class JoylintError(Exception):
    """Base exception for all joylint errors."""

    exit_code = 1


class ManifestNotFoundError(JoylintError):
    """Raised when the project has no package.json."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"package.json not found: {path}")


class ManifestParseError(JoylintError):
    """Raised when package.json is not a valid JSON object."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid package.json at {path}: {reason}")


class UnsupportedManagerError(JoylintError):
    """Raised for a package manager outside the supported set."""

    def __init__(self, manager: str, supported: list[str]):
        self.manager = manager
        self.supported = supported
        super().__init__(
            f"Unsupported package manager '{manager}', expected one of: {', '.join(supported)}"
        )


class ExternalProcessError(JoylintError):
    """Raised when a spawned command exits non-zero.

    ``exit_code`` mirrors the child's status so the CLI can propagate it.
    """

    def __init__(self, command: list[str], returncode: int):
        self.command = command
        self.returncode = returncode
        self.exit_code = returncode if returncode > 0 else 1
        super().__init__(f"Command failed (exit {returncode}): {' '.join(command)}")


class InvalidCommandError(JoylintError):
    """Raised when a control verb or its arguments cannot be routed."""


class ConfigError(JoylintError):
    """Raised when the project control config is unreadable or invalid."""


class ReleaseError(JoylintError):
    """Raised when a release cannot be packaged or uploaded."""


class HooksError(JoylintError):
    """Raised when hook directories or scripts cannot be written."""
