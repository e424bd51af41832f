"""Translate manifest payloads into domain tiles."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tilesync.domain.model import ComponentName, Tile

if TYPE_CHECKING:
    from .schema import TilePayload


def parse_tile(payload: TilePayload) -> Tile:
    return Tile(
        category=payload.category.strip(),
        component=ComponentName(
            package=payload.component.package.strip(),
            class_name=payload.component.class_name.strip(),
        ),
        priority=payload.priority,
        title=payload.title,
        summary=payload.summary,
        metadata=dict(payload.metadata),
    )
