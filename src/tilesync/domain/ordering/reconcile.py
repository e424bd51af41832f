"""Identity-preserving reconciliation of an ordered container.

The pass is position based rather than a minimum edit script: stale children
are removed, missing ones inserted at their target index, and a final walk
fixes the order. Children are matched by object identity, never recreated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from tilesync.domain.ports import Attachable, OrderedContainer

log = logging.getLogger(__name__)

TItem = TypeVar("TItem", bound="Attachable")


@dataclass(slots=True)
class ReconcileResult:
    """Counts of container mutations performed by one pass."""

    removed: int = 0
    inserted: int = 0
    moved: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.removed or self.inserted or self.moved)


def reconcile_children(
    container: OrderedContainer[TItem],
    candidates: Iterable[TItem],
    *,
    predicate: Callable[[TItem], bool] | None = None,
) -> ReconcileResult:
    """Converge ``container`` to the candidates accepted by ``predicate``, in order.

    A child already sitting at its target index keeps its place: it is never
    removed and re-inserted, only shifted by its neighbours' moves.
    """

    desired = [item for item in candidates if predicate is None or predicate(item)]
    desired_ids = {id(item) for item in desired}
    prior = _children(container)
    result = ReconcileResult()

    # children already at their final index must not be touched by the reorder walk
    pinned = {
        id(item)
        for index, item in enumerate(prior)
        if index < len(desired) and desired[index] is item
    }

    for child in prior:
        if id(child) in desired_ids:
            continue
        if container.has_transient(child):
            container.clear_transient(child)
        container.remove(child)
        result.removed += 1

    for index, item in enumerate(desired):
        # may still be transiently present if it was just removed and added again
        if container.has_transient(item):
            container.clear_transient(item)
        if item.parent is None:
            container.insert_at(item, min(index, container.child_count()))
            result.inserted += 1
        elif item.parent is not container:
            log.debug("Skipping %r: attached to another container", item)

    expected = [item for item in desired if item.parent is container]
    container.begin_position_change()
    try:
        result.moved = _reorder(container, expected, pinned)
    finally:
        container.end_position_change()

    if result.changed:
        log.debug(
            "Reconciled %d children: removed=%d inserted=%d moved=%d",
            len(expected),
            result.removed,
            result.inserted,
            result.moved,
        )
    return result


def _children(container: OrderedContainer[TItem]) -> list[TItem]:
    return [container.child_at(index) for index in range(container.child_count())]


def _reorder(
    container: OrderedContainer[TItem],
    expected: list[TItem],
    pinned: set[int],
) -> int:
    moved = 0
    index = 0
    while index < min(container.child_count(), len(expected)):
        actual = container.child_at(index)
        wanted = expected[index]
        if actual is wanted:
            index += 1
            continue

        if id(wanted) in pinned:
            # step the intruder behind the pinned child; the pinned child only shifts
            _move(container, actual, _index_of(container, wanted))
        else:
            _move(container, wanted, index)
        moved += 1
    return moved


def _move(container: OrderedContainer[TItem], item: TItem, index: int) -> None:
    container.remove(item)
    container.insert_at(item, index)


def _index_of(container: OrderedContainer[TItem], item: TItem) -> int:
    for index in range(container.child_count()):
        if container.child_at(index) is item:
            return index
    raise LookupError(f"{item!r} is not a child of {container!r}")
