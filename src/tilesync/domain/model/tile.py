"""Tiles and the component identity they are deduplicated by."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, order=True)
class ComponentName:
    """Opaque ``(package, class_name)`` address of the component a tile opens."""

    package: str
    class_name: str

    def __post_init__(self) -> None:
        if not self.package or not self.class_name:
            raise ValueError("component package and class name must be non-empty")

    def flatten(self) -> str:
        return f"{self.package}/{self.class_name}"

    def short_class_name(self) -> str:
        """Class name relative to the package when possible (``.Foo`` style)."""
        if self.class_name.startswith(f"{self.package}."):
            return self.class_name[len(self.package) :]
        return self.class_name

    @classmethod
    def unflatten(cls, text: str) -> ComponentName:
        """Parse ``package/class``; a class starting with ``.`` is relative to the package."""

        package, sep, class_name = text.strip().partition("/")
        if not sep or not package or not class_name:
            raise ValueError(f"Invalid component name: {text!r}")
        if class_name.startswith("."):
            class_name = package + class_name
        return cls(package=package, class_name=class_name)

    def __str__(self) -> str:
        return self.flatten()


@dataclass(eq=False, kw_only=True)
class Tile:
    """A single entry shown inside a category.

    ``identity`` never changes for the lifetime of the tile; ``priority`` and
    ``category`` are rewritten by the registry while it builds categories.
    """

    category: str
    component: ComponentName
    priority: int = 0
    title: str | None = None
    summary: str | None = None
    metadata: dict[str, str] = field(default_factory=dict[str, str])

    @property
    def identity(self) -> ComponentName:
        return self.component

    @property
    def package(self) -> str:
        return self.component.package

    def __repr__(self) -> str:
        return (
            f"Tile(category={self.category!r}, component={self.component.flatten()!r}, "
            f"priority={self.priority})"
        )
