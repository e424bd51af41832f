"""Process-wide registry of tile categories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tilesync.domain.model import LEGACY_CATEGORY_KEYS, Category

from .deduplication import DeduplicationPhase
from .migration import MigrationPhase
from .normalization import NormalizationPhase
from .pipeline import CategoryPipeline, CategoryState, RegistryContext

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from tilesync.domain.model import ComponentName, Tile
    from tilesync.domain.ports import TileSource

log = logging.getLogger(__name__)


def default_pipeline() -> CategoryPipeline:
    """Migration, then deduplication, then normalization.

    Duplicates go before renumbering so the surviving priorities stay contiguous.
    """

    return CategoryPipeline(phases=(MigrationPhase(), DeduplicationPhase(), NormalizationPhase()))


class CategoryRegistry:
    """Owns the category map and the identity cache built from a tile source.

    One instance is meant to live for the whole process and be handed to every
    consumer by the composition root. Categories are built lazily on first
    access. There is no internal locking: callers must serialize every call
    (one coordinating thread); concurrent use is undefined.
    """

    def __init__(
        self,
        source: TileSource,
        *,
        own_package: str,
        legacy_keys: Mapping[str, str] = LEGACY_CATEGORY_KEYS,
        pipeline: CategoryPipeline | None = None,
    ) -> None:
        self._source = source
        self._own_package = own_package
        self._legacy_keys = legacy_keys
        self._pipeline = pipeline or default_pipeline()
        self._state = CategoryState()
        self._built = False
        self.last_context: RegistryContext | None = None

    @property
    def own_package(self) -> str:
        return self._own_package

    def get_categories(self) -> list[Category]:
        """All categories in the order their keys were first seen."""

        self._ensure_built()
        return list(self._state.categories_by_key.values())

    def get_tiles_by_category(self, key: str) -> Category | None:
        self._ensure_built()
        return self._state.categories_by_key.get(key)

    def get_tile(self, component: ComponentName) -> Tile | None:
        """Cached tile for ``component``; blocked components are no longer cached."""

        self._ensure_built()
        return self._state.tile_by_identity.get(component)

    def reload_all_categories(self, *, clear_cache: bool = False) -> None:
        """Rebuild every category from the source.

        The identity cache survives unless ``clear_cache`` is set, so a component
        keeps mapping to the same ``Tile`` object across reloads.
        """

        self._built = False
        self._ensure_built(clear_cache=clear_cache)

    def update_category_from_blocklist(self, blocked: Collection[ComponentName]) -> int:
        """Drop every tile whose component is blocked; return how many were removed."""

        self._ensure_built()
        removed = 0
        for category in self._state.categories_by_key.values():
            survivors = [tile for tile in category.tiles if tile.component not in blocked]
            removed += len(category.tiles) - len(survivors)
            category.tiles[:] = survivors
        for component in blocked:
            self._state.tile_by_identity.pop(component, None)
        if removed:
            log.info("Removed %d blocked tiles", removed)
        return removed

    def _ensure_built(self, *, clear_cache: bool = False) -> None:
        if self._built:
            return
        if clear_cache:
            self._state.tile_by_identity.clear()
        self._state.categories_by_key.clear()

        loaded = 0
        seen: set[ComponentName] = set()
        for fresh in self._source.load_tiles():
            tile = self._adopt(fresh, refresh=fresh.identity not in seen)
            seen.add(fresh.identity)
            category = self._state.categories_by_key.get(tile.category)
            if category is None:
                category = Category(key=tile.category)
                self._state.categories_by_key[tile.category] = category
            category.add_tile(tile)
            loaded += 1

        context = RegistryContext(own_package=self._own_package, legacy_keys=self._legacy_keys)
        self._pipeline.run(self._state, context=context)
        self.last_context = context
        self._built = True

        log.info(
            "Built %d categories from %d tiles (migrated=%d, normalized=%d, deduplicated=%d)",
            len(self._state.categories_by_key),
            loaded,
            context.migrated,
            context.normalized,
            context.deduplicated,
        )

    def _adopt(self, fresh: Tile, *, refresh: bool) -> Tile:
        """Return the cached tile for ``fresh``'s component.

        Only the first occurrence of a component in a build refreshes the cached
        tile; later duplicates land in that tile's bucket and are dropped there.
        """

        cached = self._state.tile_by_identity.get(fresh.identity)
        if cached is None:
            self._state.tile_by_identity[fresh.identity] = fresh
            return fresh
        if refresh and cached is not fresh:
            cached.category = fresh.category
            cached.priority = fresh.priority
            cached.title = fresh.title
            cached.summary = fresh.summary
            cached.metadata = dict(fresh.metadata)
        return cached
