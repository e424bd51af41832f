"""Phase-based build pipeline for the category registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from tilesync.domain.model import LEGACY_CATEGORY_KEYS

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from tilesync.domain.model import Category, ComponentName, Tile


@dataclass(slots=True)
class RegistryContext:
    """Mutable context shared across build phases."""

    own_package: str
    legacy_keys: Mapping[str, str] = field(default_factory=lambda: LEGACY_CATEGORY_KEYS)
    migrated: int = 0
    normalized: int = 0
    deduplicated: int = 0


@dataclass(slots=True)
class CategoryState:
    """The two maps every phase works on, mutated in place."""

    categories_by_key: dict[str, Category] = field(default_factory=dict[str, "Category"])
    tile_by_identity: dict[ComponentName, Tile] = field(
        default_factory=dict["ComponentName", "Tile"]
    )


class CategoryPhase(Protocol):
    """Contract implemented by each build phase."""

    name: str

    def run(self, state: CategoryState, *, context: RegistryContext) -> None: ...


@dataclass(slots=True)
class CategoryPipeline:
    """Compose and execute the ordered build phases."""

    phases: Sequence[CategoryPhase] = field(default_factory=tuple)

    def with_phase(self, phase: CategoryPhase) -> CategoryPipeline:
        """Return a new pipeline appending ``phase`` at the end."""

        return CategoryPipeline(phases=(*self.phases, phase))

    def extend(self, phases: Iterable[CategoryPhase]) -> CategoryPipeline:
        """Return a new pipeline with the provided ``phases`` concatenated."""

        return CategoryPipeline(phases=(*self.phases, *tuple(phases)))

    def run(self, state: CategoryState, *, context: RegistryContext) -> CategoryState:
        """Execute the configured phases in-order against ``state``."""

        for phase in self.phases:
            phase.run(state, context=context)
        return state
