"""Domain models for donation bookings."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from food_waste_tracker.domain.entries import FoodEntry


@dataclass(frozen=True)
class Booking:
    """A trust's request to collect the leftovers of one food entry."""

    id: UUID
    owner_id: UUID
    food_entry_id: UUID
    person_name: str
    contact_number: str
    trust_name: str
    booking_date: datetime
    created_at: datetime


@dataclass(frozen=True)
class BookingDetail:
    """Booking joined with its food entry.

    ``food_entry`` is ``None`` when the referenced entry has been deleted.
    """

    booking: Booking
    food_entry: FoodEntry | None
