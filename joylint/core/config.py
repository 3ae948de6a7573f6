"""Project control config — configs/env.json + environment overrides."""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from joylint.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path("configs") / "env.json"


class ControlConfig(BaseModel):
    """Settings read by the release control commands."""

    model_config = ConfigDict(populate_by_name=True)

    development_env: dict[str, str] = Field(default_factory=dict, alias="developmentEnv")
    cos_path: str | None = Field(default=None, alias="cosPath")


def load_control_config(cwd: Path, config_path: str | None = None) -> ControlConfig:
    """Load the control config for the project at *cwd*.

    A missing default file yields an empty config; a missing explicit
    *config_path* is an error. ``JOYLINT_COS_PATH`` overrides ``cosPath``.
    """
    path = Path(config_path) if config_path else cwd / DEFAULT_CONFIG_PATH
    if not path.is_absolute():
        path = cwd / path

    data: dict = {}
    if path.is_file():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a JSON object")
    elif config_path:
        raise ConfigError(f"Config file not found: {path}")

    try:
        config = ControlConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e

    cos_override = os.environ.get("JOYLINT_COS_PATH")
    if cos_override:
        config = config.model_copy(update={"cos_path": cos_override})
    return config
