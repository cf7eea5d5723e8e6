"""Ports for persisting the tracked entity collection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from streaktracker.domain.model import TrackedEntity


@runtime_checkable
class StateRepository(Protocol):
    """Durable store for the whole entity collection.

    ``load`` never fails: missing or corrupt state yields an empty list.
    ``save`` raises ``StatePersistenceError`` when the write does not succeed.
    """

    def load(self) -> list[TrackedEntity]: ...

    def save(self, entities: Sequence[TrackedEntity]) -> None: ...
