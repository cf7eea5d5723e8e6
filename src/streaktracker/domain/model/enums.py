"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum
from typing import Final

# Entity name that switches to the alternate category set (compared case-insensitively).
ALTERNATE_GROUP_ENTITY_NAME: Final[str] = "survivor"


class Group(StrEnum):
    """Category-set selector for a tracked entity."""

    PRIMARY = "primary"
    ALTERNATE = "alternate"

    @classmethod
    def for_entity_name(cls, name: str) -> Group:
        if name.lower() == ALTERNATE_GROUP_ENTITY_NAME:
            return cls.ALTERNATE
        return cls.PRIMARY
