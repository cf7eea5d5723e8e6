"""Domain error types."""

from __future__ import annotations


class StatePersistenceError(RuntimeError):
    """Raised when the entity collection cannot be written to durable storage."""


class SelectionError(LookupError):
    """Raised when a requested entity or category does not exist."""
