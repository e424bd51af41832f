"""Errors raised while resolving tilesync settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Settings are missing or unusable."""


class MissingConfigurationError(ConfigurationError):
    """One or more required environment variables are unset or blank."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Missing configuration for: {', '.join(self.names)}")


class ManifestNotConfiguredError(ConfigurationError):
    """Raised when a tile manifest is needed but no path was given."""

    def __init__(self, env_var: str) -> None:
        self.env_var = env_var
        super().__init__(f"No tile manifest configured (pass --manifest or set {env_var})")
