"""YAML config loader with dotted-key access."""

from pathlib import Path
from typing import Any

import yaml

from weatherapp.config.schema import AppConfig


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, every section takes its defaults.
    """
    if path is None:
        return AppConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'forecast.timeout_seconds'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
