"""Data models for the dependency installer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from joylint.exceptions import UnsupportedManagerError


class PackageManager(str, Enum):
    """Supported Node.js package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @classmethod
    def parse(cls, value: str | PackageManager) -> PackageManager:
        """Resolve *value* to a member, raising UnsupportedManagerError otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedManagerError(str(value), [m.value for m in cls]) from None


@dataclass(frozen=True)
class DependencyDescriptor:
    """One package to ensure is installed; no version means latest."""

    name: str
    version: str | None = None

    @property
    def spec(self) -> str:
        return f"{self.name}@{self.version or 'latest'}"

    @classmethod
    def parse(cls, raw: str) -> DependencyDescriptor:
        """Parse ``name``, ``name@version`` or ``@scope/name@version``."""
        raw = raw.strip()
        at = raw.rfind("@")
        if at > 0:
            return cls(name=raw[:at], version=raw[at + 1 :] or None)
        return cls(name=raw)


@dataclass
class InstallationPlan:
    """Descriptors that still need installing, plus advisories for skipped ones."""

    pending: list[DependencyDescriptor] = field(default_factory=list)
    advisories: list[str] = field(default_factory=list)

    @property
    def specs(self) -> list[str]:
        return [dep.spec for dep in self.pending]

    def __len__(self) -> int:
        return len(self.pending)
