"""Pydantic models describing the JSON tile manifest."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tilesync.domain.model import ComponentName

log = logging.getLogger(__name__)


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class ManifestBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "Manifest %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class ComponentPayload(ManifestBaseModel):
    package: str = Field(min_length=1)
    class_name: str = Field(alias="class", min_length=1)


class TilePayload(ManifestBaseModel):
    category: str = Field(min_length=1)
    component: ComponentPayload
    priority: int = 0
    title: str | None = None
    summary: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("component", mode="before")
    @classmethod
    def _expand_flattened_component(cls, value: object) -> object:
        if isinstance(value, str):
            component = ComponentName.unflatten(value)
            return {"package": component.package, "class": component.class_name}
        return value

    _normalize_title = field_validator("title", "summary", mode="before")(_blank_to_none)


class TileManifest(ManifestBaseModel):
    tiles: list[TilePayload] = Field(default_factory=list)
