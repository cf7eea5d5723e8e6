"""Streak tracking defaults and rule switches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_flag

DEFAULT_PRIMARY_CATEGORIES: Final[tuple[str, ...]] = ("4k", "3k", "Perkless 4k", "Perkless 3k")
DEFAULT_ALTERNATE_CATEGORIES: Final[tuple[str, ...]] = ("Solo escape", "3 out")


@dataclass(frozen=True, slots=True)
class TrackingConfig:
    primary_defaults: tuple[str, ...] = DEFAULT_PRIMARY_CATEGORIES
    alternate_defaults: tuple[str, ...] = DEFAULT_ALTERNATE_CATEGORIES
    # "4k" best also counts as a "3k" best for primary-group entities
    streak_floors: bool = True


def get_tracking_config() -> TrackingConfig:
    return TrackingConfig(streak_floors=env_flag("STREAKTRACKER_STREAK_FLOORS", default=True))
