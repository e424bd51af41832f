"""Tile source reading a JSON manifest from disk."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import TileManifest
from .translator import parse_tile

if TYPE_CHECKING:
    from pathlib import Path

    from tilesync.domain.model import Tile

log = logging.getLogger(__name__)


class ManifestError(ValueError):
    """Raised when a manifest cannot be read or does not match the schema."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid tile manifest {path}: {reason}")


@dataclass(slots=True)
class ManifestTileSource:
    """Reads the manifest on every load so reloads pick up edits."""

    path: Path

    def load_tiles(self) -> list[Tile]:
        manifest = self._read()
        tiles = [parse_tile(payload) for payload in manifest.tiles]
        log.debug("Loaded %d tiles from %s", len(tiles), self.path)
        return tiles

    def _read(self) -> TileManifest:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ManifestError(self.path, str(exc)) from exc
        try:
            return TileManifest.model_validate(json.loads(raw))
        except json.JSONDecodeError as exc:
            raise ManifestError(self.path, f"not valid JSON ({exc.msg})") from exc
        except ValidationError as exc:
            raise ManifestError(self.path, f"{exc.error_count()} validation error(s)") from exc
