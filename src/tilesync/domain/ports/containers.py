"""Ports for the live ordered collections a reconciliation pass mutates."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Attachable(Protocol):
    """Item that knows which container currently owns it (``None`` when detached)."""

    @property
    def parent(self) -> object | None: ...


TItem = TypeVar("TItem", bound=Attachable)


class OrderedContainer(Protocol[TItem]):
    """Minimal capability a presentation layer exposes to the reconciler.

    Implementations own the ``parent`` back-reference of their children: it is
    set by ``insert_at`` and cleared by ``remove``.
    """

    def child_count(self) -> int: ...

    def child_at(self, index: int) -> TItem: ...

    def insert_at(self, item: TItem, index: int) -> None: ...

    def remove(self, item: TItem) -> None: ...

    def has_transient(self, item: TItem) -> bool: ...

    def clear_transient(self, item: TItem) -> None: ...

    def begin_position_change(self) -> None: ...

    def end_position_change(self) -> None: ...


__all__ = ["Attachable", "OrderedContainer"]
