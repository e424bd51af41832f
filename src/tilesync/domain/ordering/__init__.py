"""Ordered collection reconciliation."""

from __future__ import annotations

from .reconcile import ReconcileResult, reconcile_children

__all__ = ["ReconcileResult", "reconcile_children"]
