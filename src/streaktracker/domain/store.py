"""In-process owner of the tracked entity collection."""

from __future__ import annotations

import copy
from logging import getLogger
from typing import TYPE_CHECKING

from streaktracker.domain.errors import StatePersistenceError
from streaktracker.domain.model import SelectionState, StoreSnapshot
from streaktracker.domain.rules import apply_outcome

if TYPE_CHECKING:
    from collections.abc import Iterable

    from streaktracker.domain.model import StreakCategory, TrackedEntity
    from streaktracker.domain.ports import StateRepository
    from streaktracker.domain.rules import OutcomeRule


log = getLogger(__name__)


class StreakStore:
    """Selection and mutation API consumed by the presentation layer.

    Every recorded outcome is written through ``repository`` immediately. A failed
    write is logged and the in-memory state is kept as is.
    """

    def __init__(
        self,
        entities: Iterable[TrackedEntity],
        *,
        repository: StateRepository,
        rules: Iterable[OutcomeRule] = (),
    ) -> None:
        self._entities = list(entities)
        self._repository = repository
        self._rules = tuple(rules)
        self._selection = SelectionState()

    @property
    def selection(self) -> SelectionState:
        return self._selection

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            entities=tuple(copy.deepcopy(self._entities)),
            selection=self._selection,
        )

    def list_entity_names(self) -> list[str]:
        return [entity.name for entity in self._entities]

    def list_category_names(self) -> list[str]:
        entity = self._selected_entity()
        return entity.category_names if entity is not None else []

    def select_entity(self, name: str) -> bool:
        for index, entity in enumerate(self._entities):
            if entity.name == name:
                self._selection = SelectionState(
                    entity_index=index,
                    category_index=_clamp(0, len(entity.streaks)),
                )
                return True
        log.debug("No entity named %r", name)
        return False

    def select_category(self, name: str) -> bool:
        entity = self._selected_entity()
        index = entity.index_of(name) if entity is not None else None
        if index is None:
            log.debug("No category named %r on the selected entity", name)
            return False
        self._selection = SelectionState(
            entity_index=self._selection.entity_index,
            category_index=index,
        )
        return True

    @property
    def selected_entity_name(self) -> str | None:
        entity = self._selected_entity()
        return entity.name if entity is not None else None

    @property
    def selected_image_path(self) -> str | None:
        entity = self._selected_entity()
        return entity.image_path if entity is not None else None

    @property
    def selected_counts(self) -> tuple[int, int] | None:
        streak = self._selected_streak()
        return (streak.current, streak.best) if streak is not None else None

    def record_outcome(self, *, is_win: bool) -> tuple[int, int]:
        """Record a win or loss on the selected category and persist the collection."""

        entity = self._selected_entity()
        streak = self._selected_streak()
        if entity is None or streak is None:
            log.warning("Ignoring outcome: nothing is selected")
            return 0, 0

        apply_outcome(streak, is_win=is_win)
        for rule in self._rules:
            rule(entity, is_win=is_win)
        log.debug(
            "Recorded %s for %r/%r: current=%s best=%s",
            "win" if is_win else "loss",
            entity.name,
            streak.name,
            streak.current,
            streak.best,
        )
        self.persist()
        return streak.current, streak.best

    def persist(self) -> bool:
        """Write the collection through the repository; return whether it succeeded."""

        try:
            self._repository.save(self._entities)
        except StatePersistenceError:
            log.exception("Could not persist streaks; keeping in-memory state")
            return False
        return True

    def _selected_entity(self) -> TrackedEntity | None:
        index = self._selection.entity_index
        if 0 <= index < len(self._entities):
            return self._entities[index]
        return None

    def _selected_streak(self) -> StreakCategory | None:
        entity = self._selected_entity()
        if entity is None:
            return None
        index = self._selection.category_index
        if 0 <= index < len(entity.streaks):
            return entity.streaks[index]
        return None


def _clamp(index: int, count: int) -> int:
    return max(0, min(index, count - 1))
