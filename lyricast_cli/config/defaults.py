"""Default configuration values for lyricast-cli."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

# NOTE:
# Every value has a default so the CLI and library work without any
# environment configuration (public LibreTranslate, local backend).

DEFAULT_CONFIG: Dict[str, Any] = {
    "api": {
        "base_url": "http://localhost:3001/api",
    },
    "translation": {
        "providers": ["backend", "google", "libretranslate"],
        "google_api_key": None,
        "libretranslate_url": "https://libretranslate.de",
        "libretranslate_api_key": None,
        "timeout": 15.0,
        "max_text_length": 5000,
        "max_chunk_size": 4000,
    },
    "extraction": {
        "timeout": 30.0,
    },
    "retry": {
        "max_retries": 3,
        "initial_delay": 1.0,
    },
    "logging": {
        "level": "WARNING",
    },
}


def get_default_config() -> Dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return deepcopy(DEFAULT_CONFIG)


def merge_config(base: Dict[str, Any], override: Dict[str, Any] | None) -> Dict[str, Any]:
    """
    Recursively merge two configuration dictionaries.

    Args:
        base: The base configuration that provides default values.
        override: Overrides coming from callers (can be None).

    Returns:
        A new dictionary containing the merged configuration.
    """
    if override is None:
        return deepcopy(base)

    merged = deepcopy(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged
