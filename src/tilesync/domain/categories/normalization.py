"""Priority normalization across packages contributing to a category."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .pipeline import CategoryPhase

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tilesync.domain.model import Category, Tile

    from .pipeline import CategoryState, RegistryContext

log = logging.getLogger(__name__)


class NormalizationPhase(CategoryPhase):
    name: str = "normalization"

    def run(self, state: CategoryState, *, context: RegistryContext) -> None:
        context.normalized += normalize_priority(context.own_package, state.categories_by_key)


def normalize_priority(own_package: str, categories_by_key: Mapping[str, Category]) -> int:
    """Sort external tiles by ``(package, priority)`` and renumber them ``0..n-1``.

    Categories holding any tile of ``own_package`` are left exactly as given.
    Returns the number of categories that were renumbered.
    """

    normalized = 0
    for category in categories_by_key.values():
        if _normalize_category(own_package, category):
            normalized += 1
    return normalized


def _normalize_category(own_package: str, category: Category) -> bool:
    if not category.tiles:
        return False
    if any(tile.package == own_package for tile in category.tiles):
        log.debug("Category %s holds tiles of %s; priorities kept", category.key, own_package)
        return False

    category.tiles.sort(key=_package_then_priority)
    for rank, tile in enumerate(category.tiles):
        tile.priority = rank
    return True


def _package_then_priority(tile: Tile) -> tuple[str, int]:
    return tile.package, tile.priority
