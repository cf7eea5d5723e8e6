"""Read-only views handed to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .streaks import StreakCategory, TrackedEntity


@dataclass(frozen=True, slots=True)
class SelectionState:
    entity_index: int = 0
    category_index: int = 0


@dataclass(frozen=True, slots=True)
class StoreSnapshot:
    """Copy of the store's collection together with the current selection."""

    entities: tuple[TrackedEntity, ...]
    selection: SelectionState

    @property
    def selected_entity(self) -> TrackedEntity | None:
        if 0 <= self.selection.entity_index < len(self.entities):
            return self.entities[self.selection.entity_index]
        return None

    @property
    def selected_category(self) -> StreakCategory | None:
        entity = self.selected_entity
        if entity is None or not 0 <= self.selection.category_index < len(entity.streaks):
            return None
        return entity.streaks[self.selection.category_index]
