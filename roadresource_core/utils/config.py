"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Config")

DEFAULT_ENV_PREFIX = "ROADRESOURCE_"


@dataclass
class Config:
    """Server configuration."""

    # Listener
    host: str = "127.0.0.1"
    port: int = 8080
    backlog: int = 128

    # Request handling
    workers: int = 4
    read_timeout: float = 30.0
    max_request_size: int = 10 * 1024 * 1024  # 10MB

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"
    access_log: bool = True

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create config from dictionary."""
        # Filter to only valid fields
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in (data or {}).items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        """Load config from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        """Load config from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)

    @classmethod
    def from_env(cls: Type[T], prefix: str = DEFAULT_ENV_PREFIX) -> T:
        """Load config from environment variables."""
        return cls.from_dict(_env_values(prefix))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def merge(self, other: Dict[str, Any]) -> "Config":
        """Return a copy with the given values taking precedence."""
        data = self.to_dict()
        data.update(other)
        return type(self).from_dict(data)


def _coerce(value: str) -> Any:
    """Convert an environment string to bool, int or float where it parses."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


def _env_values(prefix: str) -> Dict[str, Any]:
    values = {}
    for key, value in os.environ.items():
        if key.startswith(prefix):
            values[key[len(prefix):].lower()] = _coerce(value)
    return values


def load_config(
    path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> Config:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = Config()

    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path_obj.suffix == ".json":
                config = Config.from_json(path)
            elif path_obj.suffix in (".yaml", ".yml"):
                config = Config.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    # Only variables actually set override the file
    return config.merge(_env_values(env_prefix))


__all__ = [
    "Config",
    "DEFAULT_ENV_PREFIX",
    "load_config",
]
