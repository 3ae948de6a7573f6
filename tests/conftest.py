"""Shared pytest fixtures for joylint tests."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import structlog


@pytest.fixture(autouse=True)
def _quiet_logging():
    """Keep CLI tests from reconfiguring logging onto CliRunner streams."""
    with patch("joylint.cli.setup_logging"):
        yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("JOYLINT_MANAGER", "JOYLINT_COS_PATH", "JOYLINT_LOG_LEVEL", "JOYLINT_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)


def _write_manifest(root: Path, **sections) -> Path:
    path = root / "package.json"
    path.write_text(json.dumps({"name": "demo", "version": "1.0.0", **sections}, indent=2))
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project whose package.json already declares react and typescript."""
    _write_manifest(
        tmp_path,
        dependencies={"react": "18.0.0"},
        devDependencies={"typescript": "^5.0.0"},
    )
    return tmp_path


@pytest.fixture
def write_manifest():
    """Write ``package.json`` into a directory with the given sections."""
    return _write_manifest
