from __future__ import annotations

from tests.support.tiles import make_tile
from tilesync.adapters.memory import InMemoryContainer, StaticTileSource
from tilesync.domain.categories import CategoryRegistry
from tilesync.domain.model import CategoryKey, Tile
from tilesync.ui.presenter import CategoryPresenter, TileView

OWN_PACKAGE = "com.android.settings"


def _registry(*tiles: Tile) -> tuple[CategoryRegistry, StaticTileSource]:
    source = StaticTileSource(tiles)
    return CategoryRegistry(source, own_package=OWN_PACKAGE), source


def _classes(container: InMemoryContainer[TileView]) -> list[str]:
    return [view.tile.component.class_name for view in container]


def test_update_renders_category_in_normalized_order() -> None:
    registry, _ = _registry(
        make_tile("com.b", "B", category=CategoryKey.APPS, priority=1),
        make_tile("com.a", "A", category=CategoryKey.APPS, priority=9),
    )
    presenter = CategoryPresenter(registry, CategoryKey.APPS)
    container: InMemoryContainer[TileView] = InMemoryContainer()
    presenter.attach_host(container)

    (result,) = presenter.update()

    assert _classes(container) == ["A", "B"]
    assert result.inserted == 2


def test_views_keep_identity_across_reloads() -> None:
    registry, source = _registry(
        make_tile("com.a", "A", category=CategoryKey.APPS),
        make_tile("com.a", "B", category=CategoryKey.APPS),
    )
    presenter = CategoryPresenter(registry, CategoryKey.APPS)
    container: InMemoryContainer[TileView] = InMemoryContainer()
    presenter.attach_host(container)
    presenter.update()
    first_views = list(container)

    source.tiles = (
        make_tile("com.a", "C", category=CategoryKey.APPS, priority=-1),
        make_tile("com.a", "A", category=CategoryKey.APPS, priority=5),
        make_tile("com.a", "B", category=CategoryKey.APPS, priority=6),
    )
    registry.reload_all_categories()
    container.operations.clear()
    presenter.update()

    assert _classes(container) == ["C", "A", "B"]
    assert list(container)[1:] == first_views
    assert [op for op, _, _ in container.operations] == ["insert"]


def test_each_host_has_its_own_views_and_predicate() -> None:
    registry, _ = _registry(
        make_tile("com.a", "A", category=CategoryKey.SOUND),
        make_tile("com.b", "B", category=CategoryKey.SOUND),
    )
    presenter = CategoryPresenter(registry, CategoryKey.SOUND)
    status_bar: InMemoryContainer[TileView] = InMemoryContainer(name="status")
    shelf: InMemoryContainer[TileView] = InMemoryContainer(name="shelf")
    presenter.attach_host(status_bar, predicate=lambda tile: tile.package != "com.b")
    presenter.attach_host(shelf)

    presenter.update()

    assert _classes(status_bar) == ["A"]
    assert _classes(shelf) == ["A", "B"]
    assert status_bar.child_at(0) is not shelf.child_at(0)


def test_absent_category_clears_hosts() -> None:
    registry, source = _registry(make_tile("com.a", "A", category=CategoryKey.DISPLAY))
    presenter = CategoryPresenter(registry, CategoryKey.DISPLAY)
    container: InMemoryContainer[TileView] = InMemoryContainer()
    binding = presenter.attach_host(container)
    presenter.update()

    source.tiles = ()
    registry.reload_all_categories()
    presenter.update()

    assert container.child_count() == 0
    assert binding.views == {}


def test_blocked_tile_disappears_on_next_update() -> None:
    blocked = make_tile("com.a", "Blocked", category=CategoryKey.APPS)
    registry, _ = _registry(blocked, make_tile("com.a", "Kept", category=CategoryKey.APPS))
    presenter = CategoryPresenter(registry, CategoryKey.APPS)
    container: InMemoryContainer[TileView] = InMemoryContainer()
    presenter.attach_host(container)
    presenter.update()

    registry.update_category_from_blocklist({blocked.component})
    (result,) = presenter.update()

    assert _classes(container) == ["Kept"]
    assert result.removed == 1
