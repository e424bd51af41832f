"""Shared logging helpers for tilesync."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "TILESYNC_LOG_LEVEL"


def resolve_log_level(default: int = logging.INFO) -> int:
    """Level named by ``TILESYNC_LOG_LEVEL`` (e.g. ``DEBUG``), else ``default``."""

    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger once with a terse CLI format.

    Without an explicit ``level`` the environment decides, defaulting to INFO.
    Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level if level is not None else resolve_log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
