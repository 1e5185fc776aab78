"""Supabase repository for bookings."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from food_waste_tracker.adapters.supabase_food_entry_repository import parse_entry
from food_waste_tracker.adapters.supabase_query import execute
from food_waste_tracker.domain.bookings import Booking, BookingDetail
from food_waste_tracker.domain.entries import FoodEntry
from food_waste_tracker.errors import PersistenceError
from food_waste_tracker.services.bookings import BookingRepository

_TABLE = "bookings"


@dataclass
class SupabaseBookingRepository(BookingRepository):
    """Supabase-backed booking repository."""

    client: Client

    def create_booking(  # noqa: PLR0913
        self,
        owner_id: UUID,
        food_entry_id: UUID,
        person_name: str,
        contact_number: str,
        trust_name: str,
        booking_date: datetime,
    ) -> Booking:
        """Create a booking row and return it."""
        rows = execute(
            self.client.table(_TABLE).insert(
                {
                    "owner_id": str(owner_id),
                    "food_entry_id": str(food_entry_id),
                    "person_name": person_name,
                    "contact_number": contact_number,
                    "trust_name": trust_name,
                    "booking_date": booking_date.isoformat(),
                }
            ),
            "create booking",
        )
        if not rows:
            raise PersistenceError("Failed to create booking")
        return _parse_booking(rows[0])

    def list_bookings(self, owner_id: UUID) -> list[BookingDetail]:
        """Return bookings with their food entries, newest booking first.

        Entries are fetched in a second query so bookings whose entry was
        deleted are still returned.
        """
        booking_rows = execute(
            self.client.table(_TABLE)
            .select("*")
            .eq("owner_id", str(owner_id))
            .order("booking_date", desc=True),
            "list bookings",
        )
        bookings = [_parse_booking(row) for row in booking_rows]
        entry_ids = {str(booking.food_entry_id) for booking in bookings}
        entries: dict[UUID, FoodEntry] = {}
        if entry_ids:
            entry_rows = execute(
                self.client.table("food_entries")
                .select("*")
                .eq("owner_id", str(owner_id))
                .in_("id", sorted(entry_ids)),
                "load booked food entries",
            )
            entries = {UUID(str(row["id"])): parse_entry(row) for row in entry_rows}
        return [
            BookingDetail(booking=booking, food_entry=entries.get(booking.food_entry_id))
            for booking in bookings
        ]


def _parse_booking(row: dict[str, object]) -> Booking:
    return Booking(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["owner_id"])),
        food_entry_id=UUID(str(row["food_entry_id"])),
        person_name=str(row.get("person_name", "")),
        contact_number=str(row.get("contact_number", "")),
        trust_name=str(row.get("trust_name", "")),
        booking_date=datetime.fromisoformat(str(row["booking_date"])),
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
