from __future__ import annotations

from pathlib import Path

import pytest

from streaktracker.adapters.json_state import JsonStateRepository, encode
from streaktracker.domain.errors import StatePersistenceError
from streaktracker.domain.ports import StateRepository
from tests.helpers.entities import make_entity


def test_repository_satisfies_port(tmp_path: Path) -> None:
    assert isinstance(JsonStateRepository(tmp_path / "streaks.json"), StateRepository)


def test_load_missing_file_returns_empty(tmp_path: Path) -> None:
    assert JsonStateRepository(tmp_path / "streaks.json").load() == []


def test_load_corrupt_file_returns_empty(tmp_path: Path) -> None:
    path = tmp_path / "streaks.json"
    path.write_text("[{broken", encoding="utf-8")

    assert JsonStateRepository(path).load() == []


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "streaks.json"
    repository = JsonStateRepository(path)
    entities = [make_entity("Nurse", ("4k", 2, 5))]

    repository.save(entities)

    assert path.read_bytes() == encode(entities)
    assert repository.load() == entities
    assert not (tmp_path / "nested" / "streaks.json.tmp").exists()


def test_save_failure_raises_persistence_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    repository = JsonStateRepository(blocker / "streaks.json")

    with pytest.raises(StatePersistenceError):
        repository.save([make_entity("Nurse")])


def test_failed_replace_removes_staging_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "streaks.json"

    def refuse_replace(self: Path, target: Path) -> Path:
        raise PermissionError(f"cannot replace {target}")

    monkeypatch.setattr(Path, "replace", refuse_replace)

    with pytest.raises(StatePersistenceError):
        JsonStateRepository(path).save([make_entity("Nurse")])

    assert not (tmp_path / "streaks.json.tmp").exists()
    assert not path.exists()
