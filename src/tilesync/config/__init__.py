"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, ManifestNotConfiguredError, MissingConfigurationError
from .logging import LOG_LEVEL_ENV, configure_logging, resolve_log_level
from .registry import MANIFEST_ENV, OWN_PACKAGE_ENV, RegistryConfig, get_registry_config

__all__ = [
    "LOG_LEVEL_ENV",
    "MANIFEST_ENV",
    "OWN_PACKAGE_ENV",
    "ConfigurationError",
    "ManifestNotConfiguredError",
    "MissingConfigurationError",
    "RegistryConfig",
    "configure_logging",
    "get_registry_config",
    "optional_env_var",
    "resolve_log_level",
    "require_env_var",
    "require_env_vars",
]
