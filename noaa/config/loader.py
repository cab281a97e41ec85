"""YAML config loader layered over the built-in defaults."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from noaa.config.defaults import default_config
from noaa.config.schema import ClientConfig
from noaa.errors import ConfigError


def load_config(path: str | Path | None = None) -> ClientConfig:
    """Load and validate config from a YAML file.

    Keys missing from the file keep their default values. With no path the
    defaults are returned unchanged.
    """
    if path is None:
        return default_config()

    path = Path(path)
    with open(path) as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    return build_config(raw)


def build_config(overrides: dict[str, Any]) -> ClientConfig:
    """Validate ``overrides`` on top of the defaults. Raises ConfigError."""
    data = default_config().model_dump()
    data.update(overrides)
    try:
        return ClientConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
