"""Conversion options and config file loading."""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from postman_openapi.exceptions import ConfigError


class ConvertOptions(BaseModel):
    """Options controlling one conversion run."""

    model_config = ConfigDict(extra="forbid")

    default_tag: str = "default"
    strict: bool = False  # report path/method and scheme collisions as warnings
    openapi_version: str = "3.0.3"
    title: str | None = None
    version: str | None = None
    include_servers: bool = True


def load_config(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON config file into a dict of option values."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc

    try:
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Config file {path} is not valid: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def build_options(config_path: Path | None = None, **overrides: Any) -> ConvertOptions:
    """Build options from an optional config file; non-``None`` overrides win."""
    values = load_config(config_path) if config_path else {}
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ConvertOptions(**values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid options: {exc}") from exc
