"""Public interface for the JSON manifest adapter."""

from __future__ import annotations

from .schema import ComponentPayload, TileManifest, TilePayload
from .source import ManifestError, ManifestTileSource
from .translator import parse_tile

__all__ = [
    "ComponentPayload",
    "ManifestError",
    "ManifestTileSource",
    "TileManifest",
    "TilePayload",
    "parse_tile",
]
