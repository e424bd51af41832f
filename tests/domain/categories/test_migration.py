from __future__ import annotations

from typing import TYPE_CHECKING

from tests.support.tiles import category_of, make_tile
from tilesync.domain.categories import migrate_legacy_categories
from tilesync.domain.model import CategoryKey

if TYPE_CHECKING:
    from tilesync.domain.model import Category, ComponentName, Tile

OLD_WIRELESS = "com.android.settings.category.wireless"


def _cache(*tiles: Tile) -> dict[ComponentName, Tile]:
    return {tile.identity: tile for tile in tiles}


def test_migration_keeps_current_keys_untouched() -> None:
    tile1 = make_tile("PACKAGE", "1", category=CategoryKey.ACCOUNT)
    tile2 = make_tile("PACKAGE", "2", category=CategoryKey.ACCOUNT)
    categories: dict[str, Category] = {
        CategoryKey.ACCOUNT: category_of(CategoryKey.ACCOUNT, tile1, tile2)
    }

    migrated = migrate_legacy_categories(_cache(tile1, tile2), categories)

    assert migrated == 0
    assert list(categories) == [CategoryKey.ACCOUNT]
    assert categories[CategoryKey.ACCOUNT].tiles == [tile1, tile2]


def test_migration_leaves_mixed_key_package_in_both_buckets() -> None:
    tile1 = make_tile("PACKAGE", "CLASS1", category=CategoryKey.ACCOUNT)
    tile2 = make_tile("PACKAGE", "CLASS2", category=OLD_WIRELESS)
    categories: dict[str, Category] = {
        CategoryKey.ACCOUNT: category_of(CategoryKey.ACCOUNT, tile1),
        OLD_WIRELESS: category_of(OLD_WIRELESS, tile2),
    }

    migrate_legacy_categories(_cache(tile1, tile2), categories)

    assert len(categories) == 2
    assert categories[CategoryKey.ACCOUNT].tiles == [tile1]
    assert categories[OLD_WIRELESS].tiles == [tile2]
    assert tile2.category == OLD_WIRELESS
    assert CategoryKey.NETWORK not in categories


def test_migration_moves_legacy_only_package_to_canonical_key() -> None:
    tile1 = make_tile("PACKAGE", "CLASS1", category=OLD_WIRELESS)
    categories: dict[str, Category] = {OLD_WIRELESS: category_of(OLD_WIRELESS, tile1)}

    migrated = migrate_legacy_categories(_cache(tile1), categories)

    assert migrated == 1
    assert len(categories) == 2
    assert categories[CategoryKey.NETWORK].tiles == [tile1]
    assert tile1.category == CategoryKey.NETWORK
    # the legacy entry survives, emptied
    assert len(categories[OLD_WIRELESS]) == 0


def test_migration_appends_to_existing_canonical_category() -> None:
    current = make_tile("com.current", "Wifi", category=CategoryKey.NETWORK)
    legacy_a = make_tile("com.legacy", "A", category=OLD_WIRELESS)
    legacy_b = make_tile("com.legacy", "B", category="com.android.settings.category.device")
    categories: dict[str, Category] = {
        CategoryKey.NETWORK: category_of(CategoryKey.NETWORK, current),
        OLD_WIRELESS: category_of(OLD_WIRELESS, legacy_a),
        "com.android.settings.category.device": category_of(
            "com.android.settings.category.device", legacy_b
        ),
    }

    migrate_legacy_categories(_cache(current, legacy_a, legacy_b), categories)

    assert categories[CategoryKey.NETWORK].tiles == [current, legacy_a]
    assert categories[CategoryKey.SYSTEM].tiles == [legacy_b]


def test_migration_ignores_unmapped_keys() -> None:
    tile = make_tile("com.vendor", "Gadget", category="com.vendor.category.gadgets")
    categories: dict[str, Category] = {
        "com.vendor.category.gadgets": category_of("com.vendor.category.gadgets", tile)
    }

    assert migrate_legacy_categories(_cache(tile), categories) == 0
    assert categories["com.vendor.category.gadgets"].tiles == [tile]


def test_migration_is_idempotent() -> None:
    legacy = make_tile("com.legacy", "A", category=OLD_WIRELESS)
    mixed_new = make_tile("PACKAGE", "CLASS1", category=CategoryKey.ACCOUNT)
    mixed_old = make_tile("PACKAGE", "CLASS2", category=OLD_WIRELESS)
    categories: dict[str, Category] = {
        OLD_WIRELESS: category_of(OLD_WIRELESS, legacy, mixed_old),
        CategoryKey.ACCOUNT: category_of(CategoryKey.ACCOUNT, mixed_new),
    }
    cache = _cache(legacy, mixed_new, mixed_old)

    migrate_legacy_categories(cache, categories)
    snapshot = {key: list(category.tiles) for key, category in categories.items()}

    assert migrate_legacy_categories(cache, categories) == 0
    assert {key: list(category.tiles) for key, category in categories.items()} == snapshot
    assert snapshot[OLD_WIRELESS] == [mixed_old]
    assert snapshot[CategoryKey.NETWORK] == [legacy]


def test_migration_on_empty_maps_is_a_no_op() -> None:
    categories: dict[str, Category] = {}

    assert migrate_legacy_categories({}, categories) == 0
    assert categories == {}


def test_migration_honours_custom_table() -> None:
    tile = make_tile("com.vendor", "Gadget", category="old.gadgets")
    categories: dict[str, Category] = {"old.gadgets": category_of("old.gadgets", tile)}

    migrate_legacy_categories(
        _cache(tile), categories, legacy_keys={"old.gadgets": CategoryKey.DEVICE}
    )

    assert categories[CategoryKey.DEVICE].tiles == [tile]
