"""Streak counters and the entities that own them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .enums import Group

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(slots=True)
class StreakCategory:
    """Named ``(current, best)`` counter pair for one achievement type."""

    name: str
    current: int = 0
    best: int = 0


@dataclass(slots=True)
class TrackedEntity:
    """A trackable character with its image and independent streak categories."""

    name: str
    image_path: str
    streaks: list[StreakCategory] = field(default_factory=list)

    @property
    def group(self) -> Group:
        return Group.for_entity_name(self.name)

    @property
    def category_names(self) -> list[str]:
        return [streak.name for streak in self.streaks]

    def find_streak(self, name: str) -> StreakCategory | None:
        for streak in self.streaks:
            if streak.name == name:
                return streak
        return None

    def index_of(self, name: str) -> int | None:
        for index, streak in enumerate(self.streaks):
            if streak.name == name:
                return index
        return None

    def ensure_categories(self, names: Iterable[str]) -> bool:
        """Append a zeroed category for every missing name; return whether any was added."""

        added = False
        for name in names:
            if self.find_streak(name) is None:
                self.streaks.append(StreakCategory(name=name))
                added = True
        return added
