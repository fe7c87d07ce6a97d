"""Build the runtime configuration from defaults and environment variables.

The environment is read once, when :func:`load_config` is called; the
returned dictionary is not refreshed afterwards.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .defaults import get_default_config, merge_config
from .validator import ConfigValidator

ENV_PREFIX = "LYRICAST_"


def _parse_list(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def _parse_optional(raw: str) -> Optional[str]:
    return raw or None


# env suffix -> (section, key, parser)
ENV_VARS: Dict[str, Tuple[str, str, Callable[[str], Any]]] = {
    "API_BASE_URL": ("api", "base_url", str),
    "GOOGLE_TRANSLATE_KEY": ("translation", "google_api_key", _parse_optional),
    "LIBRETRANSLATE_URL": ("translation", "libretranslate_url", str),
    "LIBRETRANSLATE_API_KEY": ("translation", "libretranslate_api_key", _parse_optional),
    "TIMEOUT": ("translation", "timeout", float),
    "MAX_TEXT_LENGTH": ("translation", "max_text_length", int),
    "MAX_CHUNK_SIZE": ("translation", "max_chunk_size", int),
    "PROVIDERS": ("translation", "providers", _parse_list),
    "EXTRACTION_TIMEOUT": ("extraction", "timeout", float),
    "MAX_RETRIES": ("retry", "max_retries", int),
    "RETRY_DELAY": ("retry", "initial_delay", float),
    "LOG_LEVEL": ("logging", "level", str.upper),
}


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Collect configuration overrides from ``LYRICAST_*`` environment variables.

    Raises:
        ValueError: if a variable cannot be parsed (the message names it)
    """
    environ = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    for suffix, (section, key, parser) in ENV_VARS.items():
        name = f"{ENV_PREFIX}{suffix}"
        raw = environ.get(name)
        if raw is None:
            continue
        try:
            value = parser(raw.strip())
        except ValueError as e:
            raise ValueError(f"Invalid value for {name}: {raw!r}") from e
        overrides.setdefault(section, {})[key] = value
    return overrides


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Return the validated configuration: defaults <- environment <- overrides.

    Raises:
        ValueError: if an environment variable is malformed or the merged
            configuration fails validation
    """
    config = merge_config(get_default_config(), config_from_env(environ))
    config = merge_config(config, overrides)
    ConfigValidator.validate_or_raise(config)
    return config
