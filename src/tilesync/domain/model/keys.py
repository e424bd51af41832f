"""Category keys and the backward-compatibility table for deprecated keys."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping


class CategoryKey(StrEnum):
    HOMEPAGE = "com.android.settings.category.ia.homepage"
    NETWORK = "com.android.settings.category.ia.wireless"
    CONNECT = "com.android.settings.category.ia.connect"
    DEVICE = "com.android.settings.category.ia.device"
    APPS = "com.android.settings.category.ia.apps"
    APPS_DEFAULT = "com.android.settings.category.ia.apps.default"
    BATTERY = "com.android.settings.category.ia.battery"
    DISPLAY = "com.android.settings.category.ia.display"
    SOUND = "com.android.settings.category.ia.sound"
    STORAGE = "com.android.settings.category.ia.storage"
    SECURITY = "com.android.settings.category.ia.security"
    ACCOUNT = "com.android.settings.category.ia.accounts"
    SYSTEM = "com.android.settings.category.ia.system"
    SYSTEM_LANGUAGE = "com.android.settings.category.ia.language"
    SYSTEM_DEVELOPMENT = "com.android.settings.category.ia.development"


LEGACY_WIRELESS: Final[str] = "com.android.settings.category.wireless"
LEGACY_DEVICE: Final[str] = "com.android.settings.category.device"
LEGACY_PERSONAL: Final[str] = "com.android.settings.category.personal"
LEGACY_SYSTEM: Final[str] = "com.android.settings.category.system"

LEGACY_CATEGORY_KEYS: Final[Mapping[str, str]] = MappingProxyType(
    {
        LEGACY_WIRELESS: CategoryKey.NETWORK,
        LEGACY_DEVICE: CategoryKey.SYSTEM,
        LEGACY_PERSONAL: CategoryKey.SYSTEM,
        LEGACY_SYSTEM: CategoryKey.SYSTEM,
    }
)


def is_legacy_key(key: str, legacy_keys: Mapping[str, str] = LEGACY_CATEGORY_KEYS) -> bool:
    return key in legacy_keys


def canonical_key_for(key: str, legacy_keys: Mapping[str, str] = LEGACY_CATEGORY_KEYS) -> str:
    """Return the canonical key for ``key``; keys without a mapping are returned as-is."""

    return legacy_keys.get(key, key)
