"""In-memory adapters: a static tile source and an ordered container."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

    from tilesync.domain.model import Tile

log = logging.getLogger(__name__)


@dataclass(slots=True)
class StaticTileSource:
    """Tile source serving a fixed sequence of tiles."""

    tiles: Sequence[Tile] = ()

    def load_tiles(self) -> Iterable[Tile]:
        return list(self.tiles)


class MutableChild(Protocol):
    parent: object | None


TItem = TypeVar("TItem", bound=MutableChild)


@dataclass(eq=False)
class InMemoryContainer(Generic[TItem]):
    """List-backed container that records every mutation.

    With ``animate_removals`` a removed child lingers as a transient child
    (still owned by this container) until ``clear_transient`` is called,
    except while positions are being changed.
    """

    name: str = "container"
    animate_removals: bool = False
    children: list[TItem] = field(default_factory=list)
    transient: list[TItem] = field(default_factory=list)
    operations: list[tuple[str, TItem, int | None]] = field(default_factory=list)
    position_changes: int = 0
    changing_positions: bool = False

    def child_count(self) -> int:
        return len(self.children)

    def child_at(self, index: int) -> TItem:
        return self.children[index]

    def insert_at(self, item: TItem, index: int) -> None:
        if item.parent is not None:
            raise ValueError(f"{item!r} already has a parent; remove it first")
        if not 0 <= index <= len(self.children):
            raise IndexError(f"index {index} out of range for {len(self.children)} children")
        self.children.insert(index, item)
        item.parent = self
        self.operations.append(("insert", item, index))

    def remove(self, item: TItem) -> None:
        index = self._index_of(item)
        if index is None:
            log.debug("%s: ignoring removal of non-child %r", self.name, item)
            return
        del self.children[index]
        self.operations.append(("remove", item, index))
        if self.animate_removals and not self.changing_positions:
            self.transient.append(item)
            return
        item.parent = None

    def has_transient(self, item: TItem) -> bool:
        return any(candidate is item for candidate in self.transient)

    def clear_transient(self, item: TItem) -> None:
        for index, candidate in enumerate(self.transient):
            if candidate is item:
                del self.transient[index]
                item.parent = None
                self.operations.append(("clear_transient", item, None))
                return

    def begin_position_change(self) -> None:
        self.changing_positions = True

    def end_position_change(self) -> None:
        self.changing_positions = False
        self.position_changes += 1

    def __iter__(self) -> Iterator[TItem]:
        return iter(list(self.children))

    def __len__(self) -> int:
        return len(self.children)

    def _index_of(self, item: TItem) -> int | None:
        for index, candidate in enumerate(self.children):
            if candidate is item:
                return index
        return None
