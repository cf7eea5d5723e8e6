"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from streaktracker.adapters.filesystem import discover, load_category_sets
from streaktracker.adapters.json_state import JsonStateRepository
from streaktracker.config import get_tracker_config
from streaktracker.domain.errors import SelectionError, StatePersistenceError
from streaktracker.domain.reconciliation import ReconciliationEngine
from streaktracker.domain.rules import StreakFloorRule
from streaktracker.domain.store import StreakStore

if TYPE_CHECKING:
    from streaktracker.config import TrackerConfig
    from streaktracker.domain.rules import OutcomeRule


log = getLogger(__name__)


def build_rules(config: TrackerConfig) -> tuple[OutcomeRule, ...]:
    if config.tracking.streak_floors:
        return (StreakFloorRule(),)
    return ()


def load_store(config: TrackerConfig | None = None) -> StreakStore:
    """Reconcile saved state with the media folder and category files.

    Without an explicit ``config`` the environment is read, which raises
    ``ConfigurationError`` for invalid values. Nothing else in startup raises.
    """

    effective = config or get_tracker_config()
    storage = effective.storage
    log.info("Loading streaks from %s", storage.data_dir)
    try:
        storage.ensure_data_dir()
    except OSError as exc:
        log.warning("Could not create data directory %s: %s", storage.data_dir, exc)

    categories = load_category_sets(storage, effective.tracking)
    repository = JsonStateRepository(storage.state_path)
    result = ReconciliationEngine(categories).reconcile(
        repository.load(),
        discover(storage.media_dir),
    )

    if result.changed:
        try:
            repository.save(result.entities)
        except StatePersistenceError:
            log.exception("Could not save reconciled streaks")

    log.info("Tracking %d entities", len(result.entities))
    return StreakStore(result.entities, repository=repository, rules=build_rules(effective))


def record(store: StreakStore, entity: str, category: str, *, is_win: bool) -> tuple[int, int]:
    """Select ``entity``/``category`` and record an outcome on it."""

    if not store.select_entity(entity):
        raise SelectionError(f"Unknown entity: {entity}")
    if not store.select_category(category):
        raise SelectionError(f"Unknown category for {entity}: {category}")
    return store.record_outcome(is_win=is_win)
