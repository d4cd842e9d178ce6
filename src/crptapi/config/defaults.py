"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# time_unit and request_limit deliberately have no defaults: they must come
# from a config file, the environment, or the command line.

# HTTP settings (None keeps the httpx transport default)
DEFAULT_TIMEOUT: float | None = None

# Signature sent alongside each document
DEFAULT_SIGNATURE = ""

# Log level
DEFAULT_LOG_LEVEL = "WARNING"

REQUIRED_KEYS = ("time_unit", "request_limit")


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "timeout": DEFAULT_TIMEOUT,
        "signature": DEFAULT_SIGNATURE,
        "log_level": DEFAULT_LOG_LEVEL,
    }
