"""Public interface for the JSON state adapter."""

from __future__ import annotations

from .codec import StateDecodeError, decode, encode
from .repository import JsonStateRepository

__all__ = [
    "JsonStateRepository",
    "StateDecodeError",
    "decode",
    "encode",
]
