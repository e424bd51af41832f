"""Ordered tile buckets keyed by category."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tilesync.domain.model.tile import Tile


@dataclass(eq=False)
class Category:
    """Tiles grouped under one key, in display order."""

    key: str
    tiles: list[Tile] = field(default_factory=list["Tile"])

    def add_tile(self, tile: Tile) -> None:
        self.tiles.append(tile)

    def remove_tile(self, tile: Tile) -> None:
        """Drop every occurrence of this exact tile object."""

        self.tiles[:] = [candidate for candidate in self.tiles if candidate is not tile]

    def __contains__(self, tile: object) -> bool:
        return any(candidate is tile for candidate in self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __len__(self) -> int:
        return len(self.tiles)
