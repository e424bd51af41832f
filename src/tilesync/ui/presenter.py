"""Keeps live containers in sync with one category of the registry."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from tilesync.domain.ordering import ReconcileResult, reconcile_children

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from tilesync.domain.categories import CategoryRegistry
    from tilesync.domain.model import ComponentName, Tile
    from tilesync.domain.ports import OrderedContainer

log = logging.getLogger(__name__)

TilePredicate: TypeAlias = "Callable[[Tile], bool]"


@dataclass(eq=False)
class TileView:
    """Per-host view of a tile; its identity outlives individual updates."""

    tile: Tile
    parent: object | None = None

    def __repr__(self) -> str:
        return f"TileView({self.tile.component.flatten()})"


ViewFactory: TypeAlias = "Callable[[Tile], TileView]"


@dataclass(slots=True)
class HostBinding:
    container: OrderedContainer[TileView]
    predicate: TilePredicate | None = None
    view_factory: ViewFactory = TileView
    views: dict[ComponentName, TileView] = field(default_factory=dict["ComponentName", TileView])

    def view_for(self, tile: Tile) -> TileView:
        view = self.views.get(tile.identity)
        if view is None:
            view = self.views[tile.identity] = self.view_factory(tile)
        else:
            view.tile = tile
        return view

    def accepts(self, view: TileView) -> bool:
        return self.predicate is None or self.predicate(view.tile)

    def forget_missing(self, tiles: Sequence[Tile]) -> None:
        current = {tile.identity for tile in tiles}
        for identity in [identity for identity in self.views if identity not in current]:
            del self.views[identity]


class CategoryPresenter:
    """Presents one category in any number of host containers.

    Every host gets its own views and its own visibility rule, the way a status
    bar and a notification shelf show different icons for the same entries.
    """

    def __init__(self, registry: CategoryRegistry, category_key: str) -> None:
        self._registry = registry
        self._category_key = category_key
        self._hosts: list[HostBinding] = []

    @property
    def category_key(self) -> str:
        return self._category_key

    def attach_host(
        self,
        container: OrderedContainer[TileView],
        *,
        predicate: TilePredicate | None = None,
        view_factory: ViewFactory = TileView,
    ) -> HostBinding:
        binding = HostBinding(container=container, predicate=predicate, view_factory=view_factory)
        self._hosts.append(binding)
        return binding

    def update(self) -> list[ReconcileResult]:
        """Reconcile every host against the category's current tiles."""

        category = self._registry.get_tiles_by_category(self._category_key)
        tiles = list(category.tiles) if category is not None else []
        if category is None:
            log.debug("Category %s is absent; clearing hosts", self._category_key)

        results: list[ReconcileResult] = []
        for host in self._hosts:
            views = [host.view_for(tile) for tile in tiles]
            results.append(reconcile_children(host.container, views, predicate=host.accepts))
            host.forget_missing(tiles)
        return results
