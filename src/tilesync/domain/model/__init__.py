"""Public domain model surface."""

from __future__ import annotations

from tilesync.domain.model.category import Category
from tilesync.domain.model.keys import (
    LEGACY_CATEGORY_KEYS,
    CategoryKey,
    canonical_key_for,
    is_legacy_key,
)
from tilesync.domain.model.tile import ComponentName, Tile

__all__ = [
    "LEGACY_CATEGORY_KEYS",
    "Category",
    "CategoryKey",
    "ComponentName",
    "Tile",
    "canonical_key_for",
    "is_legacy_key",
]
