"""Per-category duplicate elimination by tile identity."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .pipeline import CategoryPhase

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tilesync.domain.model import Category, ComponentName, Tile

    from .pipeline import CategoryState, RegistryContext

log = logging.getLogger(__name__)


class DeduplicationPhase(CategoryPhase):
    """Collapses tiles pointing at the same component once normalization finished."""

    name: str = "deduplication"

    def run(self, state: CategoryState, *, context: RegistryContext) -> None:
        context.deduplicated += deduplicate_tiles(state.categories_by_key)


def deduplicate_tiles(categories_by_key: Mapping[str, Category]) -> int:
    """Keep the first tile per identity in every category; return how many were dropped."""

    dropped = 0
    for category in categories_by_key.values():
        dropped += _deduplicate_category(category)
    return dropped


def _deduplicate_category(category: Category) -> int:
    seen: set[ComponentName] = set()
    survivors: list[Tile] = []
    for tile in category.tiles:
        if tile.identity in seen:
            log.debug("Dropping duplicate tile %s from %s", tile.identity, category.key)
            continue
        seen.add(tile.identity)
        survivors.append(tile)

    dropped = len(category.tiles) - len(survivors)
    category.tiles[:] = survivors
    return dropped
