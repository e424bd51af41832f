from __future__ import annotations

from tilesync.domain.model import Category, CategoryKey, ComponentName, Tile


def make_tile(
    package: str,
    class_name: str,
    *,
    category: str = CategoryKey.HOMEPAGE,
    priority: int = 0,
    title: str | None = None,
) -> Tile:
    return Tile(
        category=str(category),
        component=ComponentName(package=package, class_name=class_name),
        priority=priority,
        title=title,
    )


def category_of(key: str, *tiles: Tile) -> Category:
    category = Category(key=str(key))
    for tile in tiles:
        category.add_tile(tile)
    return category
