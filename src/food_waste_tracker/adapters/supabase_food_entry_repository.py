"""Supabase repository for food entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from food_waste_tracker.adapters.supabase_query import execute
from food_waste_tracker.domain.entries import FoodEntry, NewFoodEntry
from food_waste_tracker.errors import PersistenceError
from food_waste_tracker.services.entries import FoodEntryRepository

_TABLE = "food_entries"


@dataclass
class SupabaseFoodEntryRepository(FoodEntryRepository):
    """Supabase implementation for food entries."""

    client: Client

    def create_entries(
        self, owner_id: UUID, entries: list[NewFoodEntry]
    ) -> list[FoodEntry]:
        """Insert entry rows and return them."""
        payload = [
            {
                "owner_id": str(owner_id),
                "date": entry.date.isoformat(),
                "meal_type": entry.meal_type,
                "food_item": entry.food_item,
                "initial_weight": entry.initial_weight,
            }
            for entry in entries
        ]
        rows = execute(
            self.client.table(_TABLE).insert(payload), "create food entries"
        )
        if len(rows) != len(payload):
            raise PersistenceError("Failed to create food entries")
        return [parse_entry(row) for row in rows]

    def get_entry(self, entry_id: UUID, owner_id: UUID) -> FoodEntry | None:
        """Return an entry by id for its owner."""
        rows = execute(
            self.client.table(_TABLE)
            .select("*")
            .eq("id", str(entry_id))
            .eq("owner_id", str(owner_id))
            .limit(1),
            "load food entry",
        )
        if not rows:
            return None
        return parse_entry(rows[0])

    def list_entries(self, owner_id: UUID) -> list[FoodEntry]:
        """Return all entries of a user, oldest first."""
        rows = execute(
            self.client.table(_TABLE)
            .select("*")
            .eq("owner_id", str(owner_id))
            .order("created_at", desc=False),
            "list food entries",
        )
        return [parse_entry(row) for row in rows]

    def list_pending(self, owner_id: UUID) -> list[FoodEntry]:
        """Return entries whose remaining weight is null."""
        rows = execute(
            self.client.table(_TABLE)
            .select("*")
            .eq("owner_id", str(owner_id))
            .is_("remaining_weight", "null")
            .order("date", desc=True),
            "list pending food entries",
        )
        return [parse_entry(row) for row in rows]

    def list_with_remaining(self, owner_id: UUID) -> list[FoodEntry]:
        """Return entries with leftovers."""
        rows = execute(
            self.client.table(_TABLE)
            .select("*")
            .eq("owner_id", str(owner_id))
            .gt("remaining_weight", 0)
            .order("date", desc=True),
            "list available food entries",
        )
        return [parse_entry(row) for row in rows]

    def list_by_date(self, owner_id: UUID, day: date) -> list[FoodEntry]:
        """Return entries prepared on a given date."""
        rows = execute(
            self.client.table(_TABLE)
            .select("*")
            .eq("owner_id", str(owner_id))
            .eq("date", day.isoformat())
            .order("created_at", desc=False),
            "list food entries by date",
        )
        return [parse_entry(row) for row in rows]

    def update_remaining_weight(
        self, entry_id: UUID, owner_id: UUID, remaining_weight: float
    ) -> FoodEntry | None:
        """Set remaining_weight on an entry row."""
        rows = execute(
            self.client.table(_TABLE)
            .update({"remaining_weight": remaining_weight})
            .eq("id", str(entry_id))
            .eq("owner_id", str(owner_id)),
            "update remaining weight",
        )
        if not rows:
            return None
        return parse_entry(rows[0])

    def delete_entry(self, entry_id: UUID, owner_id: UUID) -> bool:
        """Delete an entry row."""
        rows = execute(
            self.client.table(_TABLE)
            .delete()
            .eq("id", str(entry_id))
            .eq("owner_id", str(owner_id)),
            "delete food entry",
        )
        return bool(rows)


def parse_entry(row: dict[str, object]) -> FoodEntry:
    """Parse a food_entries row into a domain model."""
    remaining = row.get("remaining_weight")
    return FoodEntry(
        id=UUID(str(row["id"])),
        owner_id=UUID(str(row["owner_id"])),
        date=date.fromisoformat(str(row["date"])),
        meal_type=str(row.get("meal_type", "")),
        food_item=str(row.get("food_item", "")),
        initial_weight=float(row.get("initial_weight", 0.0)),
        remaining_weight=float(remaining) if remaining is not None else None,
        created_at=datetime.fromisoformat(str(row["created_at"])),
    )
