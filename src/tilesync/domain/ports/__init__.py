"""Domain port definitions for adapters."""

from __future__ import annotations

from .containers import Attachable, OrderedContainer
from .tiles import TileSource

__all__ = [
    "Attachable",
    "OrderedContainer",
    "TileSource",
]
