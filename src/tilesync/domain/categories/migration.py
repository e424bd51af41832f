"""Backward-compatibility migration of deprecated category keys."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING

from tilesync.domain.model import LEGACY_CATEGORY_KEYS, Category

from .pipeline import CategoryPhase

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tilesync.domain.model import ComponentName, Tile

    from .pipeline import CategoryState, RegistryContext

log = logging.getLogger(__name__)


class MigrationPhase(CategoryPhase):
    """Moves tiles published under legacy keys into their canonical categories."""

    name: str = "migration"

    def run(self, state: CategoryState, *, context: RegistryContext) -> None:
        context.migrated += migrate_legacy_categories(
            state.tile_by_identity,
            state.categories_by_key,
            legacy_keys=context.legacy_keys,
        )


def migrate_legacy_categories(
    tile_by_identity: Mapping[ComponentName, Tile],
    categories_by_key: dict[str, Category],
    *,
    legacy_keys: Mapping[str, str] = LEGACY_CATEGORY_KEYS,
) -> int:
    """Rewrite legacy category keys in place and return the number of migrated tiles.

    The decision is made per target package: a package is migrated only when
    every one of its tiles still uses a legacy key. A package that already
    publishes at least one tile under a current key is trusted as-is, so its
    legacy-keyed tiles stay in their own bucket next to the canonical one.

    Migrated tiles leave the legacy bucket, which remains in the map (empty).
    Running the migration again is a no-op.
    """

    tiles_by_package: dict[str, list[Tile]] = defaultdict(list)
    for tile in tile_by_identity.values():
        tiles_by_package[tile.package].append(tile)

    migrated = 0
    for package, tiles in tiles_by_package.items():
        if not all(tile.category in legacy_keys for tile in tiles):
            if any(tile.category in legacy_keys for tile in tiles):
                log.debug("Package %s mixes legacy and current category keys; skipped", package)
            continue
        for tile in tiles:
            _move_to_canonical(tile, str(legacy_keys[tile.category]), categories_by_key)
            migrated += 1

    if migrated:
        log.debug("Migrated %d tiles from legacy category keys", migrated)
    return migrated


def _move_to_canonical(
    tile: Tile,
    canonical_key: str,
    categories_by_key: dict[str, Category],
) -> None:
    legacy_category = categories_by_key.get(tile.category)
    if legacy_category is not None:
        legacy_category.remove_tile(tile)

    tile.category = canonical_key
    category = categories_by_key.get(canonical_key)
    if category is None:
        category = categories_by_key[canonical_key] = Category(key=canonical_key)
    if tile not in category:
        category.add_tile(tile)
