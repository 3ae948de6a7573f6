"""Read package.json and build the installed-dependency snapshot."""

from __future__ import annotations

import json
from pathlib import Path

from joylint.exceptions import ManifestNotFoundError, ManifestParseError

MANIFEST_NAME = "package.json"

_DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


def read_manifest(cwd: str | Path) -> dict:
    """Load ``<cwd>/package.json`` as a dict."""
    path = Path(cwd) / MANIFEST_NAME
    if not path.is_file():
        raise ManifestNotFoundError(str(path))

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ManifestParseError(str(path), str(e)) from e
    except UnicodeDecodeError as e:
        raise ManifestParseError(str(path), f"not UTF-8 text ({e.reason})") from e

    if not isinstance(data, dict):
        raise ManifestParseError(str(path), "top-level value must be an object")
    return data


def installed_dependencies(manifest: dict, path: str = MANIFEST_NAME) -> dict[str, str]:
    """Merge ``dependencies`` and ``devDependencies`` into one name -> version map.

    devDependencies only fills in names that dependencies does not declare.
    """
    snapshot: dict[str, str] = {}
    for section in _DEPENDENCY_SECTIONS:
        entries = manifest.get(section) or {}
        if not isinstance(entries, dict):
            raise ManifestParseError(path, f"'{section}' must be an object")
        for name, version in entries.items():
            snapshot.setdefault(name, str(version))
    return snapshot


def load_snapshot(cwd: str | Path) -> dict[str, str]:
    """Read the manifest fresh and return its merged dependency snapshot."""
    return installed_dependencies(read_manifest(cwd), str(Path(cwd) / MANIFEST_NAME))
