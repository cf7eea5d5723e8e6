"""Application configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import ConfigurationError
from .logging import configure_logging
from .storage import StorageConfig, get_storage_config
from .tracking import (
    DEFAULT_ALTERNATE_CATEGORIES,
    DEFAULT_PRIMARY_CATEGORIES,
    TrackingConfig,
    get_tracking_config,
)

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True, slots=True)
class TrackerConfig:
    storage: StorageConfig
    tracking: TrackingConfig


def get_tracker_config(*, data_dir: Path | None = None) -> TrackerConfig:
    return TrackerConfig(
        storage=get_storage_config(data_dir=data_dir),
        tracking=get_tracking_config(),
    )


__all__ = [
    "DEFAULT_ALTERNATE_CATEGORIES",
    "DEFAULT_PRIMARY_CATEGORIES",
    "ConfigurationError",
    "StorageConfig",
    "TrackerConfig",
    "TrackingConfig",
    "configure_logging",
    "get_storage_config",
    "get_tracker_config",
    "get_tracking_config",
]
