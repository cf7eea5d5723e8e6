"""Data storage configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import optional_env_var

DEFAULT_STATE_FILENAME: Final[str] = "streaks.json"
PRIMARY_CATEGORIES_FILENAME: Final[str] = "killer_streaks.txt"
ALTERNATE_CATEGORIES_FILENAME: Final[str] = "survivor_streaks.txt"
MEDIA_DIRNAME: Final[str] = "media"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path
    state_filename: str = DEFAULT_STATE_FILENAME

    def ensure_data_dir(self) -> Path:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir

    @property
    def state_path(self) -> Path:
        return self.data_dir / self.state_filename

    @property
    def primary_categories_path(self) -> Path:
        return self.data_dir / PRIMARY_CATEGORIES_FILENAME

    @property
    def alternate_categories_path(self) -> Path:
        return self.data_dir / ALTERNATE_CATEGORIES_FILENAME

    @property
    def media_dir(self) -> Path:
        return self.data_dir / MEDIA_DIRNAME


def get_storage_config(*, data_dir: Path | None = None) -> StorageConfig:
    if data_dir is None:
        env_dir = optional_env_var("STREAKTRACKER_DATA_DIR")
        data_dir = Path(env_dir).expanduser() if env_dir else Path()
    state_filename = optional_env_var("STREAKTRACKER_STATE_FILE") or DEFAULT_STATE_FILENAME
    return StorageConfig(data_dir=data_dir, state_filename=state_filename)
