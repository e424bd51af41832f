"""Category registry: key migration, priority normalization and deduplication."""

from __future__ import annotations

from .deduplication import DeduplicationPhase, deduplicate_tiles
from .migration import MigrationPhase, migrate_legacy_categories
from .normalization import NormalizationPhase, normalize_priority
from .pipeline import CategoryPhase, CategoryPipeline, CategoryState, RegistryContext
from .registry import CategoryRegistry, default_pipeline

__all__ = [
    "CategoryPhase",
    "CategoryPipeline",
    "CategoryRegistry",
    "CategoryState",
    "DeduplicationPhase",
    "MigrationPhase",
    "NormalizationPhase",
    "RegistryContext",
    "deduplicate_tiles",
    "default_pipeline",
    "migrate_legacy_categories",
    "normalize_priority",
]
