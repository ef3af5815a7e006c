"""REPL and driver configuration.

Configuration is a YAML mapping checked against ``schemas/config.schema.json``.
It is looked up from an explicit path, then the ``ADAMSCRIPT_CONFIG``
environment variable; with neither, defaults apply.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ADAMSCRIPT_CONFIG"
SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "config.schema.json"


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded or is invalid."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        base = super().__str__()
        return f"{self.path}: {base}" if self.path else base


@dataclass(frozen=True)
class ReplConfig:
    """Settings for the interactive front end."""

    prompt: str = "❯ "
    show_ast: bool = False
    color: bool = True
    indent: int = 2
    banner: bool = True


def _load_schema() -> dict[str, Any]:
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_config(data: Any, path: Path | None = None) -> None:
    """Validate raw config *data* against the schema."""
    try:
        jsonschema.validate(instance=data, schema=_load_schema())
    except jsonschema.ValidationError as e:
        where = ".".join(str(p) for p in e.absolute_path)
        message = f"Schema validation error: {e.message}"
        if where:
            message += f" (at {where})"
        raise ConfigError(message, path) from e


def load_config(path: str | Path) -> ReplConfig:
    """Load and validate a YAML configuration file."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigError("File not found", path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", path) from e

    # An empty file means "all defaults".
    if data is None:
        data = {}
    validate_config(data, path)
    logger.info("loaded configuration from %s", path)
    return replace(ReplConfig(), **data)


def resolve_config(path: str | Path | None = None) -> ReplConfig:
    """Return the effective configuration.

    Args:
        path: Explicit config file; takes precedence over the environment.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or None
    if path is None:
        logger.debug("no configuration file, using defaults")
        return ReplConfig()
    return load_config(path)
