"""Configuration helpers: defaults, environment loading and validation."""

from .defaults import DEFAULT_CONFIG, get_default_config, merge_config
from .env import config_from_env, load_config
from .validator import ConfigValidator, ValidationError

__all__ = [
    "DEFAULT_CONFIG",
    "get_default_config",
    "merge_config",
    "config_from_env",
    "load_config",
    "ConfigValidator",
    "ValidationError",
]
