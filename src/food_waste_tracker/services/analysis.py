"""Per-day waste analysis."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from food_waste_tracker.domain.waste import (
    ConsumptionCategory,
    WasteShare,
    consumption_category,
    consumption_rate,
    daily_waste_distribution,
    entry_waste_percentage,
    recommendations,
)
from food_waste_tracker.services.entries import FoodEntryRepository


@dataclass(frozen=True)
class FoodAnalysis:
    """Waste metrics and advice for one entry."""

    entry_id: UUID
    food_item: str
    meal_type: str
    initial_weight: float
    remaining_weight: float | None
    waste_percentage: float | None
    consumption_rate: float | None
    category: ConsumptionCategory | None
    recommendations: list[str]


@dataclass
class WasteAnalysisService:
    """Builds waste reports from stored entries."""

    repository: FoodEntryRepository

    def analyse_day(self, owner_id: UUID, day: date) -> list[FoodAnalysis]:
        """Return one analysis row per entry prepared on the given day."""
        results = []
        for entry in self.repository.list_by_date(owner_id, day):
            percentage = entry_waste_percentage(entry)
            results.append(
                FoodAnalysis(
                    entry_id=entry.id,
                    food_item=entry.food_item,
                    meal_type=entry.meal_type,
                    initial_weight=entry.initial_weight,
                    remaining_weight=entry.remaining_weight,
                    waste_percentage=percentage,
                    consumption_rate=consumption_rate(percentage),
                    category=(
                        consumption_category(percentage)
                        if percentage is not None
                        else None
                    ),
                    recommendations=(
                        recommendations(entry.food_item, percentage)
                        if percentage is not None
                        else []
                    ),
                )
            )
        return results

    def daily_distribution(self, owner_id: UUID, day: date) -> list[WasteShare]:
        """Return the waste share of every entry prepared on the given day."""
        return daily_waste_distribution(self.repository.list_by_date(owner_id, day))
