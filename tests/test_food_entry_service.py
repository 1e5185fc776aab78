"""Tests for the food entry lifecycle service."""

import asyncio
from datetime import date
from uuid import uuid4

import pytest

from food_waste_tracker.domain.waste import (
    ConsumptionCategory,
    consumption_category,
    entry_waste_percentage,
)
from food_waste_tracker.errors import (
    InvalidInputError,
    NotFoundError,
    SensorUnavailableError,
)


def test_create_entry_starts_pending(entry_service, owner_id) -> None:
    entry = entry_service.create_entry("2024-01-01", "lunch", "Rice", 10, owner_id)

    assert entry.date == date(2024, 1, 1)
    assert entry.meal_type == "lunch"
    assert entry.initial_weight == 10.0
    assert entry.remaining_weight is None
    assert entry.is_pending


@pytest.mark.parametrize(
    ("day", "meal_type", "food_item", "weight"),
    [
        ("2024-02-30", "lunch", "Rice", 1),
        ("not-a-date", "lunch", "Rice", 1),
        ("2024-01-01", "brunch", "Rice", 1),
        ("2024-01-01", "lunch", "   ", 1),
        ("2024-01-01", "lunch", "Rice", -0.5),
        ("2024-01-01", "lunch", "Rice", float("nan")),
    ],
)
def test_create_entry_rejects_invalid_input(
    entry_service, entry_repository, owner_id, day, meal_type, food_item, weight
) -> None:
    with pytest.raises(InvalidInputError):
        entry_service.create_entry(day, meal_type, food_item, weight, owner_id)

    assert entry_repository.entries == {}


def test_create_entries_is_all_or_nothing(
    entry_service, entry_repository, owner_id
) -> None:
    with pytest.raises(InvalidInputError):
        entry_service.create_entries(
            date(2024, 1, 1), "dinner", [("Rice", 4), ("Curry", -1)], owner_id
        )

    assert entry_repository.entries == {}

    created = entry_service.create_entries(
        date(2024, 1, 1), "dinner", [("Rice", 4), ("Curry", 2.5)], owner_id
    )
    assert [entry.food_item for entry in created] == ["Rice", "Curry"]


def test_create_entries_requires_items(entry_service, owner_id) -> None:
    with pytest.raises(InvalidInputError):
        entry_service.create_entries("2024-01-01", "lunch", [], owner_id)


def test_rice_scenario(entry_service, owner_id) -> None:
    entry = entry_service.create_entry("2024-01-01", "lunch", "Rice", 10, owner_id)
    assert entry in entry_service.list_pending(owner_id)

    resolved = entry_service.set_remaining_weight(entry.id, 3, owner_id)

    assert resolved.remaining_weight == 3
    assert not resolved.is_pending
    assert entry_service.list_pending(owner_id) == []
    percentage = entry_waste_percentage(resolved)
    assert percentage == pytest.approx(30.0)
    assert consumption_category(percentage) == ConsumptionCategory.LOW


@pytest.mark.parametrize("remaining", [0, 2.5, 10])
def test_set_remaining_weight_round_trips(
    entry_service, entry_repository, owner_id, remaining
) -> None:
    entry = entry_service.create_entry("2024-01-01", "lunch", "Rice", 10, owner_id)

    entry_service.set_remaining_weight(entry.id, remaining, owner_id)

    assert entry_repository.get_entry(entry.id, owner_id).remaining_weight == remaining


def test_set_remaining_weight_above_initial_leaves_entry_unchanged(
    entry_service, entry_repository, owner_id
) -> None:
    entry = entry_service.create_entry("2024-01-01", "lunch", "Rice", 10, owner_id)

    with pytest.raises(InvalidInputError):
        entry_service.set_remaining_weight(entry.id, 10.01, owner_id)
    with pytest.raises(InvalidInputError):
        entry_service.set_remaining_weight(entry.id, -1, owner_id)

    assert entry_repository.get_entry(entry.id, owner_id) == entry


def test_set_remaining_weight_overwrites_resolved_entry(
    entry_service, owner_id
) -> None:
    entry = entry_service.create_entry("2024-01-01", "lunch", "Rice", 10, owner_id)
    entry_service.set_remaining_weight(entry.id, 3, owner_id)

    updated = entry_service.set_remaining_weight(entry.id, 1, owner_id)

    assert updated.remaining_weight == 1


def test_set_remaining_weight_is_owner_scoped(entry_service, owner_id) -> None:
    entry = entry_service.create_entry("2024-01-01", "lunch", "Rice", 10, owner_id)

    with pytest.raises(NotFoundError):
        entry_service.set_remaining_weight(entry.id, 3, uuid4())
    with pytest.raises(NotFoundError):
        entry_service.set_remaining_weight(uuid4(), 3, owner_id)


def test_list_pending_orders_by_date_desc(entry_service, owner_id) -> None:
    older = entry_service.create_entry("2024-01-01", "lunch", "Rice", 1, owner_id)
    newer = entry_service.create_entry("2024-01-03", "lunch", "Soup", 1, owner_id)
    resolved = entry_service.create_entry("2024-01-02", "lunch", "Pasta", 1, owner_id)
    entry_service.set_remaining_weight(resolved.id, 0.5, owner_id)
    entry_service.create_entry("2024-01-04", "lunch", "Salad", 1, uuid4())

    assert entry_service.list_pending(owner_id) == [newer, older]


def test_list_all_filters_case_insensitively(entry_service, owner_id) -> None:
    rice = entry_service.create_entry("2024-01-01", "lunch", "Rice", 1, owner_id)
    soup = entry_service.create_entry("2024-01-01", "dinner", "Soup", 1, owner_id)

    assert entry_service.list_all(owner_id, search="rICE") == [rice]
    assert entry_service.list_all(owner_id, search="DINNER") == [soup]
    assert entry_service.list_all(owner_id, search="bread") == []


def test_list_all_sorts_with_stable_ties(entry_service, owner_id) -> None:
    first = entry_service.create_entry("2024-01-01", "lunch", "Rice", 5, owner_id)
    second = entry_service.create_entry("2024-01-02", "lunch", "bread", 5, owner_id)
    third = entry_service.create_entry("2024-01-03", "lunch", "Curry", 2, owner_id)

    by_weight_asc = entry_service.list_all(
        owner_id, sort_field="initial_weight", sort_direction="asc"
    )
    by_weight_desc = entry_service.list_all(
        owner_id, sort_field="initial_weight", sort_direction="desc"
    )
    by_name = entry_service.list_all(
        owner_id, sort_field="food_item", sort_direction="asc"
    )
    default = entry_service.list_all(owner_id)

    assert by_weight_asc == [third, first, second]
    assert by_weight_desc == [first, second, third]
    assert by_name == [second, third, first]
    assert default == [third, second, first]


def test_list_all_places_missing_values_last(entry_service, owner_id) -> None:
    pending = entry_service.create_entry("2024-01-01", "lunch", "Rice", 5, owner_id)
    low = entry_service.create_entry("2024-01-01", "lunch", "Soup", 5, owner_id)
    high = entry_service.create_entry("2024-01-01", "lunch", "Curry", 5, owner_id)
    low = entry_service.set_remaining_weight(low.id, 1, owner_id)
    high = entry_service.set_remaining_weight(high.id, 4, owner_id)

    assert entry_service.list_all(
        owner_id, sort_field="remaining_weight", sort_direction="desc"
    ) == [high, low, pending]
    assert entry_service.list_all(
        owner_id, sort_field="remaining_weight", sort_direction="asc"
    ) == [low, high, pending]


def test_list_all_rejects_unknown_sort(entry_service, owner_id) -> None:
    with pytest.raises(InvalidInputError):
        entry_service.list_all(owner_id, sort_field="owner_id")
    with pytest.raises(InvalidInputError):
        entry_service.list_all(owner_id, sort_direction="sideways")


def test_delete_entry(entry_service, owner_id) -> None:
    entry = entry_service.create_entry("2024-01-01", "lunch", "Rice", 1, owner_id)

    with pytest.raises(NotFoundError):
        entry_service.delete_entry(entry.id, uuid4())

    entry_service.delete_entry(entry.id, owner_id)

    assert entry_service.list_all(owner_id) == []
    with pytest.raises(NotFoundError):
        entry_service.delete_entry(entry.id, owner_id)


def test_record_remaining_from_sensor(entry_service, sensor_client, owner_id) -> None:
    entry = entry_service.create_entry("2024-01-01", "lunch", "Rice", 10, owner_id)
    sensor_client.weight = 2.25

    updated = asyncio.run(entry_service.record_remaining_from_sensor(entry.id, owner_id))

    assert updated.remaining_weight == 2.25


def test_record_remaining_from_sensor_failure_keeps_entry_pending(
    entry_service, entry_repository, sensor_client, owner_id
) -> None:
    entry = entry_service.create_entry("2024-01-01", "lunch", "Rice", 10, owner_id)
    sensor_client.available = False

    with pytest.raises(SensorUnavailableError):
        asyncio.run(entry_service.record_remaining_from_sensor(entry.id, owner_id))

    assert entry_repository.get_entry(entry.id, owner_id).is_pending
