"""Reconciliation of persisted, discovered and configured tracking data."""

from __future__ import annotations

from .engine import CategorySets, DiscoveredEntity, ReconciliationEngine, ReconciliationResult

__all__ = [
    "CategorySets",
    "DiscoveredEntity",
    "ReconciliationEngine",
    "ReconciliationResult",
]
