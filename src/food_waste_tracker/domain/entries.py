"""Domain models for food entries."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal
from uuid import UUID

MealType = Literal["breakfast", "lunch", "dinner", "snack"]

MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")

KNOWN_FOOD_ITEMS: tuple[str, ...] = (
    "Rice",
    "Curry",
    "Bread",
    "Vegetables",
    "Fruits",
    "Soup",
    "Pasta",
    "Salad",
    "Dessert",
    "Beverages",
)


@dataclass(frozen=True)
class NewFoodEntry:
    """Validated values for an entry that has not been stored yet."""

    date: date
    meal_type: str
    food_item: str
    initial_weight: float


@dataclass(frozen=True)
class FoodEntry:
    """A single weighing of a prepared dish.

    ``remaining_weight`` stays ``None`` until the leftovers are weighed.
    """

    id: UUID
    owner_id: UUID
    date: date
    meal_type: str
    food_item: str
    initial_weight: float
    remaining_weight: float | None
    created_at: datetime

    @property
    def is_pending(self) -> bool:
        """Return True while the remaining weight has not been recorded."""
        return self.remaining_weight is None

    @property
    def is_available_for_booking(self) -> bool:
        """Return True when leftovers were recorded and some food is left."""
        return self.remaining_weight is not None and self.remaining_weight > 0
