"""File-backed repository for the entity collection."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from streaktracker.domain.errors import StatePersistenceError

from .codec import StateDecodeError, decode, encode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from streaktracker.domain.model import TrackedEntity


log = getLogger(__name__)


class JsonStateRepository:
    """Store the whole collection as one JSON document at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> list[TrackedEntity]:
        try:
            data = self.path.read_bytes()
        except FileNotFoundError:
            log.info("No saved streaks at %s; starting empty", self.path)
            return []
        except OSError as exc:
            log.warning("Could not read %s (%s); starting empty", self.path, exc)
            return []

        try:
            entities = decode(data)
        except StateDecodeError as exc:
            log.warning("Ignoring unreadable state in %s: %s", self.path, exc)
            return []
        log.debug("Loaded %d entities from %s", len(entities), self.path)
        return entities

    def save(self, entities: Sequence[TrackedEntity]) -> None:
        data = encode(entities)
        staging = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            staging.write_bytes(data)
            staging.replace(self.path)
        except OSError as exc:
            staging.unlink(missing_ok=True)
            raise StatePersistenceError(f"Could not write {self.path}: {exc}") from exc
        log.debug("Saved %d entities to %s", len(entities), self.path)
