from __future__ import annotations

import pytest

from tilesync.config import LOG_LEVEL_ENV, MANIFEST_ENV, OWN_PACKAGE_ENV


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (OWN_PACKAGE_ENV, MANIFEST_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)
