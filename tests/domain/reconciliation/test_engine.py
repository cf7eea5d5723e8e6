from __future__ import annotations

from streaktracker.domain.model import StreakCategory, TrackedEntity
from streaktracker.domain.reconciliation import (
    CategorySets,
    DiscoveredEntity,
    ReconciliationEngine,
)
from tests.helpers.entities import make_entity

PRIMARY = ("4k", "3k", "Perkless 4k", "Perkless 3k")
ALTERNATE = ("Solo escape", "3 out")


def _engine(
    primary: tuple[str, ...] = PRIMARY,
    alternate: tuple[str, ...] = ALTERNATE,
) -> ReconciliationEngine:
    return ReconciliationEngine(CategorySets(primary=primary, alternate=alternate))


def test_discovered_entities_get_their_group_categories() -> None:
    result = _engine().reconcile(
        [],
        [
            DiscoveredEntity(name="Nurse", image_path="media/Nurse.png"),
            DiscoveredEntity(name="survivor", image_path="media/survivor.png"),
        ],
    )

    assert result.changed
    nurse, survivor = result.entities
    assert nurse == TrackedEntity(
        name="Nurse",
        image_path="media/Nurse.png",
        streaks=[StreakCategory(name=name) for name in PRIMARY],
    )
    assert survivor.category_names == list(ALTERNATE)


def test_discovered_name_matching_persisted_entity_is_not_duplicated() -> None:
    persisted = [make_entity("Nurse", *((name, 1, 2) for name in PRIMARY))]

    result = _engine().reconcile(
        persisted,
        [DiscoveredEntity(name="Nurse", image_path="elsewhere/Nurse.png")],
    )

    assert not result.changed
    assert result.entities == persisted


def test_name_deduplication_is_case_sensitive() -> None:
    persisted = [make_entity("Nurse", *((name, 0, 0) for name in PRIMARY))]

    result = _engine().reconcile(persisted, [DiscoveredEntity(name="nurse", image_path="n.png")])

    assert [entity.name for entity in result.entities] == ["Nurse", "nurse"]


def test_new_categories_are_appended_and_old_ones_kept() -> None:
    persisted = [make_entity("Nurse", ("Retired", 3, 9), ("4k", 1, 1))]

    result = _engine(primary=("4k", "3k")).reconcile(persisted)

    assert result.changed
    assert result.entities[0].streaks == [
        StreakCategory(name="Retired", current=3, best=9),
        StreakCategory(name="4k", current=1, best=1),
        StreakCategory(name="3k"),
    ]


def test_category_names_only_grow() -> None:
    persisted = [
        make_entity("Nurse", ("a", 0, 0), ("b", 1, 1)),
        make_entity("Survivor", ("x", 2, 2)),
    ]
    before = {entity.name: set(entity.category_names) for entity in persisted}

    result = _engine(primary=("b",), alternate=()).reconcile(persisted)

    for entity in result.entities:
        assert before[entity.name] <= set(entity.category_names)


def test_reconciliation_is_idempotent() -> None:
    first = _engine().reconcile(
        [make_entity("Zed", ("4k", 2, 3)), make_entity("Ann")],
        [DiscoveredEntity(name="Bob", image_path="media/Bob.png")],
    )

    second = _engine().reconcile(first.entities, [DiscoveredEntity(name="Bob", image_path="x")])

    assert first.changed
    assert not second.changed
    assert second.entities == first.entities


def test_result_is_sorted_ordinally() -> None:
    result = _engine(primary=()).reconcile(
        [make_entity("b"), make_entity("B"), make_entity("a")],
        [DiscoveredEntity(name="A", image_path="A.png")],
    )

    assert [entity.name for entity in result.entities] == ["A", "B", "a", "b"]


def test_duplicate_configured_categories_do_not_duplicate_streaks() -> None:
    result = _engine(primary=("4k", "4k", "3k")).reconcile(
        [], [DiscoveredEntity(name="Oni", image_path="media/Oni.png")]
    )

    assert result.entities[0].category_names == ["4k", "3k"]


def test_inconsistent_persisted_state_is_healed() -> None:
    persisted = [
        make_entity("Nurse", ("4k", 5, 2), ("4k", 9, 9), ("3k", -3, -1)),
        make_entity("Nurse", ("4k", 1, 1)),
    ]

    result = _engine(primary=("4k", "3k")).reconcile(persisted)

    assert result.changed
    assert result.entities == [make_entity("Nurse", ("4k", 5, 5), ("3k", 0, 0))]


def test_inputs_are_not_mutated() -> None:
    persisted = [make_entity("Nurse", ("4k", 0, 0))]

    _engine().reconcile(persisted)

    assert persisted[0].category_names == ["4k"]


def test_duplicate_persisted_entity_only_adds_missing_categories() -> None:
    persisted = [
        make_entity("Nurse", ("4k", 2, 5)),
        make_entity("Nurse", ("4k", 9, 9), ("Retired", 1, 4)),
    ]

    result = _engine(primary=("4k",)).reconcile(persisted)

    assert result.changed
    assert result.entities == [make_entity("Nurse", ("4k", 2, 5), ("Retired", 1, 4))]


def test_blank_persisted_category_name_is_kept() -> None:
    persisted = [make_entity("Nurse", ("", 1, 1), ("4k", 0, 0))]

    result = _engine(primary=("4k",)).reconcile(persisted)

    assert not result.changed
    assert result.entities[0].category_names == ["", "4k"]
