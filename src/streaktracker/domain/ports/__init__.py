"""Ports consumed by the domain layer."""

from __future__ import annotations

from .persistence import StateRepository

__all__ = ["StateRepository"]
