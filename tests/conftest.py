from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from streaktracker.config import StorageConfig, TrackerConfig, TrackingConfig

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "STREAKTRACKER_DATA_DIR",
        "STREAKTRACKER_STATE_FILE",
        "STREAKTRACKER_STREAK_FLOORS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    path = tmp_path / "tracker"
    (path / "media").mkdir(parents=True)
    return path


@pytest.fixture
def tracker_config(data_dir: Path) -> TrackerConfig:
    return TrackerConfig(storage=StorageConfig(data_dir=data_dir), tracking=TrackingConfig())


@pytest.fixture
def add_media(data_dir: Path) -> Callable[..., None]:
    def _add(*file_names: str) -> None:
        for file_name in file_names:
            (data_dir / "media" / file_name).write_bytes(b"\x89PNG\r\n\x1a\n")

    return _add
