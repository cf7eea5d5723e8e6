"""Domain model for streak tracking."""

from __future__ import annotations

from .enums import ALTERNATE_GROUP_ENTITY_NAME, Group
from .snapshot import SelectionState, StoreSnapshot
from .streaks import StreakCategory, TrackedEntity

__all__ = [
    "ALTERNATE_GROUP_ENTITY_NAME",
    "Group",
    "SelectionState",
    "StoreSnapshot",
    "StreakCategory",
    "TrackedEntity",
]
