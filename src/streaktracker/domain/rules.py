"""Outcome arithmetic and cross-category rules applied after a recorded outcome."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final, Protocol

from streaktracker.domain.model import Group

if TYPE_CHECKING:
    from streaktracker.domain.model import StreakCategory, TrackedEntity

FOUR_KILL_CATEGORY: Final[str] = "4k"
THREE_KILL_CATEGORY: Final[str] = "3k"

log = getLogger(__name__)


def apply_outcome(streak: StreakCategory, *, is_win: bool) -> None:
    """Advance or reset ``streak`` in place."""

    if is_win:
        streak.current += 1
        streak.best = max(streak.best, streak.current)
    else:
        streak.current = 0


class OutcomeRule(Protocol):
    """Hook run on the owning entity after every recorded outcome."""

    def __call__(self, entity: TrackedEntity, *, is_win: bool) -> None: ...


@dataclass(frozen=True, slots=True)
class StreakFloorRule:
    """Raise ``target.best`` to at least ``source.best`` whenever a win is recorded.

    Applies to every win on an entity of ``group``, whichever category was active.
    Entities of other groups, and losses, are left untouched.
    """

    source: str = FOUR_KILL_CATEGORY
    target: str = THREE_KILL_CATEGORY
    group: Group = Group.PRIMARY

    def __call__(self, entity: TrackedEntity, *, is_win: bool) -> None:
        if not is_win or entity.group is not self.group:
            return
        source = entity.find_streak(self.source)
        target = entity.find_streak(self.target)
        if source is None or target is None:
            return
        if source.best > target.best:
            log.debug(
                "Raising %r best on %r from %s to %s",
                self.target,
                entity.name,
                target.best,
                source.best,
            )
            target.best = source.best
