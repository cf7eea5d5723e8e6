"""Category configuration files: one category name per line."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from streaktracker.domain.reconciliation import CategorySets

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from streaktracker.config import StorageConfig, TrackingConfig


log = getLogger(__name__)

_HEADER = (
    "# Streak Categories Configuration",
    "# Each line represents a streak type you want to track.",
    "# Lines starting with # are comments and will be ignored.",
    "# Empty lines are also ignored.",
    "#",
    "# Default streak categories:",
)


def load_categories(path: Path, defaults: Sequence[str]) -> list[str]:
    """Return the categories listed in ``path``, falling back to ``defaults``.

    When the file is missing or lists nothing it is (re)written with ``defaults``.
    This function never raises.
    """

    categories = _read_categories(path)
    if categories:
        return categories

    try:
        write_default_categories(path, defaults)
    except OSError as exc:
        log.warning("Could not create %s: %s", path, exc)
    else:
        log.info("Wrote default categories to %s", path)
    return list(defaults)


def write_default_categories(path: Path, defaults: Sequence[str]) -> None:
    lines = [*_HEADER, *defaults]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def load_category_sets(storage: StorageConfig, tracking: TrackingConfig) -> CategorySets:
    return CategorySets(
        primary=tuple(load_categories(storage.primary_categories_path, tracking.primary_defaults)),
        alternate=tuple(
            load_categories(storage.alternate_categories_path, tracking.alternate_defaults)
        ),
    )


def _read_categories(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as exc:
        log.warning("Could not read %s: %s", path, exc)
        return []
    stripped = (line.strip() for line in text.split("\n"))
    return [line for line in stripped if line and not line.startswith("#")]
