"""Convert the entity collection to and from its JSON representation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from streaktracker.domain.model import StreakCategory, TrackedEntity

from .schema import EntityRecord, StateDocument, StreakRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

_INDENT = 2


class StateDecodeError(ValueError):
    """Raised when persisted bytes are not a valid entity collection."""


def encode(entities: Sequence[TrackedEntity]) -> bytes:
    """Return pretty-printed UTF-8 JSON, one record per entity."""

    records = [_to_record(entity) for entity in entities]
    return StateDocument.dump_json(records, indent=_INDENT) + b"\n"


def decode(data: bytes | str) -> list[TrackedEntity]:
    try:
        records = StateDocument.validate_json(data)
    except ValidationError as exc:
        raise StateDecodeError(f"Invalid streak state: {exc.error_count()} error(s)") from exc
    return [_from_record(record) for record in records]


def _to_record(entity: TrackedEntity) -> EntityRecord:
    return EntityRecord(
        name=entity.name,
        image_path=entity.image_path,
        streaks=[
            StreakRecord(name=streak.name, current=streak.current, best=streak.best)
            for streak in entity.streaks
        ],
    )


def _from_record(record: EntityRecord) -> TrackedEntity:
    return TrackedEntity(
        name=record.name,
        image_path=record.image_path,
        streaks=[
            StreakCategory(name=streak.name, current=streak.current, best=streak.best)
            for streak in record.streaks
        ],
    )
