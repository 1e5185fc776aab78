"""Food entry lifecycle service."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from food_waste_tracker.adapters.weight_sensor_client import WeightSensorClient
from food_waste_tracker.domain.entries import MEAL_TYPES, FoodEntry, NewFoodEntry
from food_waste_tracker.errors import InvalidInputError, NotFoundError

SORT_FIELDS = (
    "date",
    "meal_type",
    "food_item",
    "initial_weight",
    "remaining_weight",
    "created_at",
)
SORT_DIRECTIONS = ("asc", "desc")

_logger = logging.getLogger(__name__)


class FoodEntryRepository(Protocol):
    """Persistence interface for food entries."""

    def create_entries(
        self, owner_id: UUID, entries: list[NewFoodEntry]
    ) -> list[FoodEntry]:
        """Insert entries and return the stored rows."""

    def get_entry(self, entry_id: UUID, owner_id: UUID) -> FoodEntry | None:
        """Return an entry owned by the user, if present."""

    def list_entries(self, owner_id: UUID) -> list[FoodEntry]:
        """Return all entries of a user in insertion order."""

    def list_pending(self, owner_id: UUID) -> list[FoodEntry]:
        """Return entries without a remaining weight, newest date first."""

    def list_with_remaining(self, owner_id: UUID) -> list[FoodEntry]:
        """Return entries with a positive remaining weight, newest date first."""

    def list_by_date(self, owner_id: UUID, day: date) -> list[FoodEntry]:
        """Return entries prepared on a given date."""

    def update_remaining_weight(
        self, entry_id: UUID, owner_id: UUID, remaining_weight: float
    ) -> FoodEntry | None:
        """Set the remaining weight and return the updated entry."""

    def delete_entry(self, entry_id: UUID, owner_id: UUID) -> bool:
        """Delete an entry and return True when a row was removed."""


@dataclass
class FoodEntryService:
    """Creates entries and records their leftovers."""

    repository: FoodEntryRepository
    sensor_client: WeightSensorClient

    def create_entry(
        self,
        day: date | str,
        meal_type: str,
        food_item: str,
        initial_weight: float,
        owner_id: UUID,
    ) -> FoodEntry:
        """Create a pending entry for a single dish."""
        return self.create_entries(
            day, meal_type, [(food_item, initial_weight)], owner_id
        )[0]

    def create_entries(
        self,
        day: date | str,
        meal_type: str,
        items: Sequence[tuple[str, float]],
        owner_id: UUID,
    ) -> list[FoodEntry]:
        """Create pending entries for several dishes of one meal.

        Every item is validated before anything is stored.
        """
        if not items:
            raise InvalidInputError("At least one food item is required")
        parsed_day = _parse_date(day)
        meal = _validate_meal_type(meal_type)
        new_entries = [
            NewFoodEntry(
                date=parsed_day,
                meal_type=meal,
                food_item=_validate_food_item(food_item),
                initial_weight=_validate_weight(initial_weight, "initial_weight"),
            )
            for food_item, initial_weight in items
        ]
        created = self.repository.create_entries(owner_id, new_entries)
        _logger.info(
            "Created food entries: owner_id=%s count=%s", owner_id, len(created)
        )
        return created

    def set_remaining_weight(
        self, entry_id: UUID, remaining_weight: float, owner_id: UUID
    ) -> FoodEntry:
        """Record the leftover weight of an entry."""
        entry = self.repository.get_entry(entry_id, owner_id)
        if entry is None:
            raise NotFoundError(f"Food entry {entry_id} not found")
        weight = _validate_weight(remaining_weight, "remaining_weight")
        if weight > entry.initial_weight:
            raise InvalidInputError(
                "remaining_weight cannot exceed initial_weight "
                f"({weight} > {entry.initial_weight})"
            )
        updated = self.repository.update_remaining_weight(entry_id, owner_id, weight)
        if updated is None:
            raise NotFoundError(f"Food entry {entry_id} not found")
        _logger.info(
            "Recorded remaining weight: entry_id=%s remaining=%s", entry_id, weight
        )
        return updated

    async def record_remaining_from_sensor(
        self, entry_id: UUID, owner_id: UUID
    ) -> FoodEntry:
        """Read the scale and record its value as the remaining weight."""
        weight = await self.sensor_client.read_weight()
        return self.set_remaining_weight(entry_id, weight, owner_id)

    def list_pending(self, owner_id: UUID) -> list[FoodEntry]:
        """Return entries still waiting for a remaining weight."""
        return self.repository.list_pending(owner_id)

    def list_all(
        self,
        owner_id: UUID,
        search: str | None = None,
        sort_field: str = "date",
        sort_direction: str = "desc",
    ) -> list[FoodEntry]:
        """Return entries filtered by a search term and sorted by one field."""
        if sort_field not in SORT_FIELDS:
            raise InvalidInputError(f"Cannot sort by {sort_field!r}")
        if sort_direction not in SORT_DIRECTIONS:
            raise InvalidInputError(f"Unknown sort direction {sort_direction!r}")
        entries = self.repository.list_entries(owner_id)
        if search:
            needle = search.lower()
            entries = [
                entry
                for entry in entries
                if needle in entry.food_item.lower()
                or needle in entry.meal_type.lower()
            ]
        return _sort_entries(entries, sort_field, descending=sort_direction == "desc")

    def delete_entry(self, entry_id: UUID, owner_id: UUID) -> None:
        """Delete an entry; bookings that reference it are left in place."""
        if not self.repository.delete_entry(entry_id, owner_id):
            raise NotFoundError(f"Food entry {entry_id} not found")
        _logger.info("Deleted food entry: entry_id=%s", entry_id)


def _sort_entries(
    entries: list[FoodEntry], field: str, *, descending: bool
) -> list[FoodEntry]:
    # sorted() is stable, so equal keys keep insertion order in both directions.
    present = [entry for entry in entries if getattr(entry, field) is not None]
    missing = [entry for entry in entries if getattr(entry, field) is None]
    present = sorted(
        present,
        key=lambda entry: _sort_key(getattr(entry, field)),
        reverse=descending,
    )
    return present + missing


def _sort_key(value: object) -> object:
    if isinstance(value, str):
        return value.casefold()
    return value


def _parse_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise InvalidInputError(f"Invalid date {value!r}") from exc


def _validate_meal_type(value: str) -> str:
    meal = str(value).strip().lower()
    if meal not in MEAL_TYPES:
        raise InvalidInputError(
            f"meal_type must be one of {', '.join(MEAL_TYPES)}, got {value!r}"
        )
    return meal


def _validate_food_item(value: str) -> str:
    name = str(value).strip()
    if not name:
        raise InvalidInputError("food_item must not be empty")
    return name


def _validate_weight(value: float, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidInputError(f"{field} must be a number")
    weight = float(value)
    if not math.isfinite(weight) or weight < 0:
        raise InvalidInputError(f"{field} must be a non-negative number")
    return weight
