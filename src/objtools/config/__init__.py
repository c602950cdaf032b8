"""Environment-backed configuration helpers."""

from .errors import ConfigurationError
from .runtime import env_bool, env_str, reset_default_values

__all__ = [
    "ConfigurationError",
    "env_bool",
    "env_str",
    "reset_default_values",
]
