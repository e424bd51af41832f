"""Ports for obtaining tiles from upstream providers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tilesync.domain.model import Tile


@runtime_checkable
class TileSource(Protocol):
    """Supplies tiles with category, component and priority already populated.

    The registry does not validate where the tiles come from.
    """

    def load_tiles(self) -> Iterable[Tile]: ...


__all__ = ["TileSource"]
