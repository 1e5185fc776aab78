"""Pydantic models for the HTTP API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from food_waste_tracker.domain.bookings import BookingDetail
from food_waste_tracker.domain.entries import FoodEntry
from food_waste_tracker.domain.waste import (
    WasteShare,
    entry_waste_percentage,
    waste_level,
)
from food_waste_tracker.services.analysis import FoodAnalysis


class DishInput(BaseModel):
    """One dish of a multi-dish entry form."""

    food_item: str
    initial_weight: float


class FoodEntriesCreate(BaseModel):
    """Request body for creating the entries of one meal."""

    date: str
    meal_type: str
    items: list[DishInput]


class RemainingWeightUpdate(BaseModel):
    """Request body for recording leftovers."""

    remaining_weight: float


class BookingCreate(BaseModel):
    """Request body for booking leftover food."""

    food_entry_id: UUID
    person_name: str
    contact_number: str
    trust_name: str


class FoodEntryOut(BaseModel):
    """Food entry with derived waste metrics."""

    id: UUID
    date: date
    meal_type: str
    food_item: str
    initial_weight: float
    remaining_weight: float | None
    created_at: datetime
    waste_percentage: float | None
    waste_level: str

    @classmethod
    def from_domain(cls, entry: FoodEntry) -> "FoodEntryOut":
        """Build the response model from a domain entry."""
        percentage = entry_waste_percentage(entry)
        return cls(
            id=entry.id,
            date=entry.date,
            meal_type=entry.meal_type,
            food_item=entry.food_item,
            initial_weight=entry.initial_weight,
            remaining_weight=entry.remaining_weight,
            created_at=entry.created_at,
            waste_percentage=percentage,
            waste_level=str(waste_level(percentage)),
        )


class BookingOut(BaseModel):
    """Booking with its food entry, if the entry still exists."""

    id: UUID
    food_entry_id: UUID
    person_name: str
    contact_number: str
    trust_name: str
    booking_date: datetime
    created_at: datetime
    food_entry: FoodEntryOut | None = None

    @classmethod
    def from_domain(cls, detail: BookingDetail) -> "BookingOut":
        """Build the response model from a booking detail."""
        booking = detail.booking
        return cls(
            id=booking.id,
            food_entry_id=booking.food_entry_id,
            person_name=booking.person_name,
            contact_number=booking.contact_number,
            trust_name=booking.trust_name,
            booking_date=booking.booking_date,
            created_at=booking.created_at,
            food_entry=(
                FoodEntryOut.from_domain(detail.food_entry)
                if detail.food_entry
                else None
            ),
        )


class FoodAnalysisOut(BaseModel):
    """Waste analysis row for one entry."""

    entry_id: UUID
    food_item: str
    meal_type: str
    initial_weight: float
    remaining_weight: float | None
    waste_percentage: float | None
    consumption_rate: float | None
    category: str | None
    recommendations: list[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, analysis: FoodAnalysis) -> "FoodAnalysisOut":
        """Build the response model from an analysis row."""
        return cls(
            entry_id=analysis.entry_id,
            food_item=analysis.food_item,
            meal_type=analysis.meal_type,
            initial_weight=analysis.initial_weight,
            remaining_weight=analysis.remaining_weight,
            waste_percentage=analysis.waste_percentage,
            consumption_rate=analysis.consumption_rate,
            category=str(analysis.category) if analysis.category else None,
            recommendations=analysis.recommendations,
        )


class WasteShareOut(BaseModel):
    """Slice of a day's waste distribution."""

    food_item: str
    waste_percentage: float | None

    @classmethod
    def from_domain(cls, share: WasteShare) -> "WasteShareOut":
        """Build the response model from a waste share."""
        return cls(food_item=share.food_item, waste_percentage=share.waste_percentage)


class WeightReading(BaseModel):
    """Current scale reading."""

    weight: float
