"""Waste accounting for food entries.

The waste percentage is the share of the prepared weight that was left over,
``remaining / initial * 100``. ``None`` stands for "not applicable": the entry
is still pending or nothing was prepared.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from food_waste_tracker.domain.entries import FoodEntry

HIGH_CONSUMPTION_MAX_WASTE = 11
MEDIUM_CONSUMPTION_MAX_WASTE = 25
HIGH_WASTE_LEVEL_THRESHOLD = 50
MODERATE_WASTE_LEVEL_THRESHOLD = 25


class ConsumptionCategory(StrEnum):
    """How much of a dish was eaten, judged from its waste percentage."""

    HIGH = "High Consumption"
    MEDIUM = "Medium Consumption"
    LOW = "Low Consumption"


class WasteLevel(StrEnum):
    """Badge shown next to an entry in tabular views."""

    NOT_APPLICABLE = "n/a"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


@dataclass(frozen=True)
class WasteShare:
    """One slice of a day's waste distribution."""

    food_item: str
    waste_percentage: float | None


def waste_percentage(
    initial_weight: float, remaining_weight: float | None
) -> float | None:
    """Return the leftover share in percent, or None when not applicable."""
    if remaining_weight is None or initial_weight == 0:
        return None
    return (remaining_weight / initial_weight) * 100


def entry_waste_percentage(entry: FoodEntry) -> float | None:
    """Return the waste percentage of a stored entry."""
    return waste_percentage(entry.initial_weight, entry.remaining_weight)


def consumption_rate(percentage: float | None) -> float | None:
    """Return the eaten share in percent."""
    if percentage is None:
        return None
    return 100 - percentage


def consumption_category(percentage: float) -> ConsumptionCategory:
    """Bucket a waste percentage into a consumption category."""
    if percentage <= HIGH_CONSUMPTION_MAX_WASTE:
        return ConsumptionCategory.HIGH
    if percentage <= MEDIUM_CONSUMPTION_MAX_WASTE:
        return ConsumptionCategory.MEDIUM
    return ConsumptionCategory.LOW


def waste_level(percentage: float | None) -> WasteLevel:
    """Return the table badge for a waste percentage."""
    if percentage is None:
        return WasteLevel.NOT_APPLICABLE
    if percentage > HIGH_WASTE_LEVEL_THRESHOLD:
        return WasteLevel.HIGH
    if percentage > MODERATE_WASTE_LEVEL_THRESHOLD:
        return WasteLevel.MODERATE
    return WasteLevel.LOW


def recommendations(food_item: str, percentage: float) -> list[str]:
    """Return advisory lines for a dish given its waste percentage."""
    if percentage <= HIGH_CONSUMPTION_MAX_WASTE:
        return [
            f"{food_item} is being managed efficiently with {percentage:.1f}% waste",
            "Maintain current portion sizes",
            "Document successful practices",
            "Consider expanding menu with similar items",
        ]
    if percentage <= MEDIUM_CONSUMPTION_MAX_WASTE:
        return [
            f"{food_item} shows moderate waste at {percentage:.1f}%",
            "Review portion sizes",
            "Monitor serving temperature",
            "Analyze peak consumption times",
        ]
    return [
        f"{food_item} needs attention with {percentage:.1f}% waste",
        f"Consider reducing preparation by {_round_half_up(percentage / 2)}%",
        "Review recipe and presentation",
        "Survey customer preferences",
    ]


def daily_waste_distribution(entries: Iterable[FoodEntry]) -> list[WasteShare]:
    """Return one waste share per entry; repeated dishes are not merged."""
    return [
        WasteShare(
            food_item=entry.food_item,
            waste_percentage=entry_waste_percentage(entry),
        )
        for entry in entries
    ]


def _round_half_up(value: float) -> int:
    # round() uses banker's rounding; 12.5 must become 13.
    return int(value + 0.5)
