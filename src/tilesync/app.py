"""Application composition root."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from tilesync.adapters.manifest import ManifestTileSource
from tilesync.adapters.memory import InMemoryContainer
from tilesync.config import MANIFEST_ENV, ManifestNotConfiguredError
from tilesync.domain.categories import CategoryRegistry
from tilesync.ui.presenter import CategoryPresenter, TilePredicate, TileView

if TYPE_CHECKING:
    from collections.abc import Collection

    from tilesync.config import RegistryConfig
    from tilesync.domain.model import Category, ComponentName
    from tilesync.domain.ports import TileSource

log = getLogger(__name__)


def build_tile_source(config: RegistryConfig) -> TileSource:
    path = config.resolve_manifest_path()
    if path is None:
        raise ManifestNotConfiguredError(MANIFEST_ENV)
    return ManifestTileSource(path)


@dataclass(slots=True)
class TileSyncApp:
    """Owns the single registry instance and hands it to every consumer."""

    config: RegistryConfig
    source: TileSource | None = None
    _registry: CategoryRegistry | None = field(default=None, init=False, repr=False)

    @property
    def registry(self) -> CategoryRegistry:
        """The process registry, created on first access."""

        if self._registry is None:
            self._registry = CategoryRegistry(
                self.source or build_tile_source(self.config),
                own_package=self.config.own_package,
            )
        return self._registry

    def presenter_for(self, category_key: str) -> CategoryPresenter:
        return CategoryPresenter(self.registry, category_key)


def list_categories(
    app: TileSyncApp,
    *,
    blocked: Collection[ComponentName] = (),
) -> list[Category]:
    """Non-empty categories after migration, normalization, dedup and blocking."""

    registry = app.registry
    if blocked:
        registry.update_category_from_blocklist(blocked)
    return [category for category in registry.get_categories() if category.tiles]


def render_category(
    app: TileSyncApp,
    category_key: str,
    *,
    blocked: Collection[ComponentName] = (),
    predicate: TilePredicate | None = None,
) -> InMemoryContainer[TileView]:
    """Render one category into a fresh in-memory container."""

    if blocked:
        app.registry.update_category_from_blocklist(blocked)
    container: InMemoryContainer[TileView] = InMemoryContainer(name=category_key)
    presenter = app.presenter_for(category_key)
    presenter.attach_host(container, predicate=predicate)
    (result,) = presenter.update()
    log.info(
        "Rendered %s: %d tiles (inserted=%d, moved=%d)",
        category_key,
        container.child_count(),
        result.inserted,
        result.moved,
    )
    return container
