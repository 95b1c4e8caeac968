"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from palette.errors import ConfigError


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "PALETTE_"
YAML_ENV_FIELDS = {"section_labels"}    # env value parsed as a YAML mapping, e.g. "{notes: Notes}"


class Settings(BaseModel):
    app_name:          str = "palette"
    project_root:      Optional[str] = Field(default=None, description="Root used to shorten project-scoped paths")
    encoding:          str = Field(default="utf-8-sig", description="Text encoding of resource files; utf-8-sig also reads plain UTF-8")
    description_width: int = Field(default=100, ge=1, description="Max characters in a one-line description")
    section_labels:    dict[str, str] = Field(default_factory=dict, description="Extra section tag -> label entries")
    verbose:           bool = Field(default=False, description="Enable debug logging")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then PALETTE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        env_name = f"{ENV_PREFIX}{name.upper()}"
        if val := os.getenv(env_name):
            if name in YAML_ENV_FIELDS:
                try:
                    val = yaml.safe_load(val)
                except yaml.YAMLError as e:
                    raise ConfigError(f"Invalid {env_name}: {e}") from e
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e
