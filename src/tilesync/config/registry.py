"""Registry configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var, require_env_var

OWN_PACKAGE_ENV: Final[str] = "TILESYNC_OWN_PACKAGE"
MANIFEST_ENV: Final[str] = "TILESYNC_MANIFEST"


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Holds the values the category registry is built from."""

    own_package: str
    manifest_path: Path | None = None

    def resolve_manifest_path(self) -> Path | None:
        if self.manifest_path is None:
            return None
        return self.manifest_path.expanduser().resolve()


def get_registry_config(
    *,
    own_package: str | None = None,
    manifest_path: Path | str | None = None,
) -> RegistryConfig:
    """Build the config from explicit values, falling back to the environment."""

    package = own_package.strip() if own_package and own_package.strip() else None
    if package is None:
        package = require_env_var(OWN_PACKAGE_ENV)

    manifest = manifest_path if manifest_path is not None else optional_env_var(MANIFEST_ENV)
    return RegistryConfig(
        own_package=package,
        manifest_path=Path(manifest) if manifest is not None else None,
    )
