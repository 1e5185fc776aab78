"""Donation booking service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from food_waste_tracker.domain.bookings import Booking, BookingDetail
from food_waste_tracker.domain.entries import FoodEntry
from food_waste_tracker.errors import InvalidInputError, NotFoundError
from food_waste_tracker.services.entries import FoodEntryRepository

_logger = logging.getLogger(__name__)


class BookingRepository(Protocol):
    """Persistence interface for bookings."""

    def create_booking(  # noqa: PLR0913
        self,
        owner_id: UUID,
        food_entry_id: UUID,
        person_name: str,
        contact_number: str,
        trust_name: str,
        booking_date: datetime,
    ) -> Booking:
        """Insert a booking and return it."""

    def list_bookings(self, owner_id: UUID) -> list[BookingDetail]:
        """Return bookings with their food entries, newest booking first."""


@dataclass
class BookingService:
    """Books leftover food for collection by trusts."""

    repository: BookingRepository
    entry_repository: FoodEntryRepository

    def list_available(self, owner_id: UUID) -> list[FoodEntry]:
        """Return entries with leftovers, newest date first.

        Entries that already have a booking are still listed.
        """
        return [
            entry
            for entry in self.entry_repository.list_with_remaining(owner_id)
            if entry.is_available_for_booking
        ]

    def create_booking(  # noqa: PLR0913
        self,
        food_entry_id: UUID,
        person_name: str,
        contact_number: str,
        trust_name: str,
        owner_id: UUID,
    ) -> BookingDetail:
        """Create a booking for an existing food entry and return it with the entry."""
        fields = {
            "person_name": person_name,
            "contact_number": contact_number,
            "trust_name": trust_name,
        }
        cleaned = {name: (value or "").strip() for name, value in fields.items()}
        empty = [name for name, value in cleaned.items() if not value]
        if empty:
            raise InvalidInputError(f"Required fields are empty: {', '.join(empty)}")
        entry = self.entry_repository.get_entry(food_entry_id, owner_id)
        if entry is None:
            raise NotFoundError(f"Food entry {food_entry_id} not found")
        booking = self.repository.create_booking(
            owner_id=owner_id,
            food_entry_id=food_entry_id,
            booking_date=datetime.now(tz=UTC),
            **cleaned,
        )
        _logger.info(
            "Created booking: booking_id=%s food_entry_id=%s",
            booking.id,
            food_entry_id,
        )
        return BookingDetail(booking=booking, food_entry=entry)

    def list_bookings(self, owner_id: UUID) -> list[BookingDetail]:
        """Return the user's bookings joined with their food entries."""
        return self.repository.list_bookings(owner_id)
