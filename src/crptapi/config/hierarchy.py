"""Layered configuration for the submission CLI and wrappers.

Later sources win: package defaults, ``~/.crptapi/config.yaml``, the nearest
``crptapi.yaml`` from the working directory upward, ``CRPTAPI_*`` environment
variables, then explicit runtime values.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from crptapi.config.defaults import REQUIRED_KEYS, get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".crptapi" / "config.yaml"
_PROJECT_CONFIG_NAME = "crptapi.yaml"

_ENV_MAP: dict[str, str] = {
    "CRPTAPI_TIME_UNIT": "time_unit",
    "CRPTAPI_REQUEST_LIMIT": "request_limit",
    "CRPTAPI_TIMEOUT": "timeout",
    "CRPTAPI_SIGNATURE": "signature",
    "CRPTAPI_LOG_LEVEL": "log_level",
}

# Environment values arrive as strings; these keys are numeric.
_NUMERIC_KEYS: dict[str, type] = {
    "request_limit": int,
    "timeout": float,
}


class ConfigError(ValueError):
    """Resolved configuration is missing a required key."""


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Resolve the configuration; runtime values of None do not override."""
    config = get_defaults()

    for path in (_GLOBAL_CONFIG_PATH, _find_project_config()):
        if path is not None:
            config.update(_load_yaml_config(path) or {})

    for env_key, config_key in _ENV_MAP.items():
        if env_key in os.environ:
            config[config_key] = _coerce_env_value(config_key, os.environ[env_key])

    config.update({k: v for k, v in runtime_overrides.items() if v is not None})
    return config


def require_keys(config: dict[str, Any], keys: tuple[str, ...] = REQUIRED_KEYS) -> None:
    """Raise ConfigError naming every required key that resolved to nothing."""
    missing = [key for key in keys if config.get(key) is None]
    if missing:
        raise ConfigError(f"Missing required configuration: {', '.join(missing)}")


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring", path)
        return None
    return data


def _find_project_config() -> Path | None:
    cwd = Path.cwd()
    for directory in (cwd, *cwd.parents):
        candidate = directory / _PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


def _coerce_env_value(key: str, value: str) -> Any:
    convert = _NUMERIC_KEYS.get(key)
    if convert is None:
        return value
    try:
        return convert(value)
    except ValueError:
        logger.warning("Ignoring type of %s=%r: expected %s", key, value, convert.__name__)
        return value
