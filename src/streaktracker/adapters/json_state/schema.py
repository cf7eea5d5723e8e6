"""Pydantic models describing the persisted state file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class StateBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class StreakRecord(StateBaseModel):
    name: str
    current: int
    best: int


class EntityRecord(StateBaseModel):
    name: str
    image_path: str
    streaks: list[StreakRecord] = Field(default_factory=list)


StateDocument = TypeAdapter(list[EntityRecord])
