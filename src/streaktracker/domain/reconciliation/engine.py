"""Merge persisted state, discovered media and configured categories.

The engine is pure: it copies its inputs, never touches the filesystem and reports
whether the result differs structurally from what was persisted so the caller can
decide to write it back.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from streaktracker.domain.model import Group, StreakCategory, TrackedEntity

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CategorySets:
    """Configured category names per group."""

    primary: tuple[str, ...]
    alternate: tuple[str, ...] = ()

    def for_group(self, group: Group) -> tuple[str, ...]:
        if group is Group.ALTERNATE:
            return self.alternate
        return self.primary


@dataclass(frozen=True, slots=True)
class DiscoveredEntity:
    """A media file that may introduce a new tracked entity."""

    name: str
    image_path: str


@dataclass(slots=True)
class ReconciliationResult:
    entities: list[TrackedEntity] = field(default_factory=list)
    changed: bool = False


@dataclass(slots=True)
class ReconciliationEngine:
    """Build the canonical entity collection."""

    categories: CategorySets

    def reconcile(
        self,
        persisted: Sequence[TrackedEntity],
        discovered: Iterable[DiscoveredEntity] = (),
    ) -> ReconciliationResult:
        entities, changed = _heal(copy.deepcopy(list(persisted)))
        known = {entity.name for entity in entities}

        added = 0
        for item in discovered:
            if item.name in known:
                continue
            entity = TrackedEntity(name=item.name, image_path=item.image_path)
            entity.ensure_categories(self.categories.for_group(entity.group))
            entities.append(entity)
            known.add(item.name)
            added += 1
            changed = True

        extended = 0
        for entity in entities:
            if entity.ensure_categories(self.categories.for_group(entity.group)):
                extended += 1
                changed = True

        entities.sort(key=lambda entity: entity.name)

        if changed:
            log.info(
                "Reconciled %d entities: %d discovered, %d extended with new categories",
                len(entities),
                added,
                extended,
            )
        return ReconciliationResult(entities=entities, changed=changed)


def _heal(entities: list[TrackedEntity]) -> tuple[list[TrackedEntity], bool]:
    healed: dict[str, TrackedEntity] = {}
    changed = False
    for entity in entities:
        if _heal_streaks(entity):
            changed = True
        first = healed.get(entity.name)
        if first is None:
            healed[entity.name] = entity
            continue
        # later duplicates only contribute categories the first record lacks
        log.warning("Merging duplicate persisted entity %r into its first record", entity.name)
        for streak in entity.streaks:
            if first.find_streak(streak.name) is None:
                first.streaks.append(streak)
        changed = True
    return list(healed.values()), changed


def _heal_streaks(entity: TrackedEntity) -> bool:
    streaks: list[StreakCategory] = []
    names: set[str] = set()
    changed = False
    for streak in entity.streaks:
        if streak.name in names:
            log.warning("Dropping repeated category %r on %r", streak.name, entity.name)
            changed = True
            continue
        names.add(streak.name)
        current = max(streak.current, 0)
        best = max(streak.best, current)
        if (current, best) != (streak.current, streak.best):
            log.warning(
                "Repairing counters of %r on %r: (%s, %s) -> (%s, %s)",
                streak.name,
                entity.name,
                streak.current,
                streak.best,
                current,
                best,
            )
            streak.current, streak.best = current, best
            changed = True
        streaks.append(streak)
    entity.streaks = streaks
    return changed
