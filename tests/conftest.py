"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from food_waste_tracker.adapters.identity_provider import IdentityProvider
from food_waste_tracker.adapters.weight_sensor_client import WeightSensorClient
from food_waste_tracker.config import Settings
from food_waste_tracker.containers import AppContainer
from food_waste_tracker.domain.bookings import Booking, BookingDetail
from food_waste_tracker.domain.entries import FoodEntry, NewFoodEntry
from food_waste_tracker.errors import SensorUnavailableError
from food_waste_tracker.services.analysis import WasteAnalysisService
from food_waste_tracker.services.bookings import BookingRepository, BookingService
from food_waste_tracker.services.entries import FoodEntryRepository, FoodEntryService

OWNER_TOKEN = "owner-token"
OTHER_TOKEN = "other-token"

_EPOCH = datetime(2024, 1, 1, tzinfo=UTC)


@dataclass
class InMemoryFoodEntryRepository(FoodEntryRepository):
    """In-memory food entry repository for tests."""

    entries: dict[UUID, FoodEntry] = field(default_factory=dict)

    def create_entries(
        self, owner_id: UUID, entries: list[NewFoodEntry]
    ) -> list[FoodEntry]:
        created = []
        for new_entry in entries:
            entry = FoodEntry(
                id=uuid4(),
                owner_id=owner_id,
                date=new_entry.date,
                meal_type=new_entry.meal_type,
                food_item=new_entry.food_item,
                initial_weight=new_entry.initial_weight,
                remaining_weight=None,
                created_at=_EPOCH + timedelta(seconds=len(self.entries)),
            )
            self.entries[entry.id] = entry
            created.append(entry)
        return created

    def get_entry(self, entry_id: UUID, owner_id: UUID) -> FoodEntry | None:
        entry = self.entries.get(entry_id)
        if entry is None or entry.owner_id != owner_id:
            return None
        return entry

    def list_entries(self, owner_id: UUID) -> list[FoodEntry]:
        return [entry for entry in self.entries.values() if entry.owner_id == owner_id]

    def list_pending(self, owner_id: UUID) -> list[FoodEntry]:
        return _by_date_desc(
            entry for entry in self.list_entries(owner_id) if entry.is_pending
        )

    def list_with_remaining(self, owner_id: UUID) -> list[FoodEntry]:
        return _by_date_desc(
            entry
            for entry in self.list_entries(owner_id)
            if entry.remaining_weight is not None and entry.remaining_weight > 0
        )

    def list_by_date(self, owner_id: UUID, day: date) -> list[FoodEntry]:
        return [entry for entry in self.list_entries(owner_id) if entry.date == day]

    def update_remaining_weight(
        self, entry_id: UUID, owner_id: UUID, remaining_weight: float
    ) -> FoodEntry | None:
        entry = self.get_entry(entry_id, owner_id)
        if entry is None:
            return None
        updated = FoodEntry(
            id=entry.id,
            owner_id=entry.owner_id,
            date=entry.date,
            meal_type=entry.meal_type,
            food_item=entry.food_item,
            initial_weight=entry.initial_weight,
            remaining_weight=remaining_weight,
            created_at=entry.created_at,
        )
        self.entries[entry_id] = updated
        return updated

    def delete_entry(self, entry_id: UUID, owner_id: UUID) -> bool:
        if self.get_entry(entry_id, owner_id) is None:
            return False
        del self.entries[entry_id]
        return True


@dataclass
class InMemoryBookingRepository(BookingRepository):
    """In-memory booking repository joined against an entry repository."""

    entry_repository: InMemoryFoodEntryRepository
    bookings: list[Booking] = field(default_factory=list)

    def create_booking(  # noqa: PLR0913
        self,
        owner_id: UUID,
        food_entry_id: UUID,
        person_name: str,
        contact_number: str,
        trust_name: str,
        booking_date: datetime,
    ) -> Booking:
        booking = Booking(
            id=uuid4(),
            owner_id=owner_id,
            food_entry_id=food_entry_id,
            person_name=person_name,
            contact_number=contact_number,
            trust_name=trust_name,
            booking_date=booking_date,
            created_at=booking_date,
        )
        self.bookings.append(booking)
        return booking

    def list_bookings(self, owner_id: UUID) -> list[BookingDetail]:
        owned = [booking for booking in self.bookings if booking.owner_id == owner_id]
        owned.sort(key=lambda booking: booking.booking_date, reverse=True)
        return [
            BookingDetail(
                booking=booking,
                food_entry=self.entry_repository.get_entry(
                    booking.food_entry_id, owner_id
                ),
            )
            for booking in owned
        ]


@dataclass
class FakeWeightSensorClient(WeightSensorClient):
    """Fake scale returning a fixed weight or failing."""

    weight: float = 1.5
    available: bool = True
    reads: int = 0

    async def read_weight(self) -> float:
        self.reads += 1
        if not self.available:
            raise SensorUnavailableError("Failed to fetch weight from sensor")
        return self.weight


@dataclass
class FakeIdentityProvider(IdentityProvider):
    """Identity provider backed by a token map."""

    tokens: dict[str, UUID] = field(default_factory=dict)

    def resolve_owner(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


def _by_date_desc(entries) -> list[FoodEntry]:  # type: ignore[no-untyped-def]
    return sorted(entries, key=lambda entry: entry.date, reverse=True)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        weight_sensor_base_url="http://scale.test",
        environment="test",
    )


@pytest.fixture
def owner_id() -> UUID:
    return uuid4()


@pytest.fixture
def entry_repository() -> InMemoryFoodEntryRepository:
    return InMemoryFoodEntryRepository()


@pytest.fixture
def booking_repository(
    entry_repository: InMemoryFoodEntryRepository,
) -> InMemoryBookingRepository:
    return InMemoryBookingRepository(entry_repository=entry_repository)


@pytest.fixture
def sensor_client() -> FakeWeightSensorClient:
    return FakeWeightSensorClient()


@pytest.fixture
def entry_service(
    entry_repository: InMemoryFoodEntryRepository,
    sensor_client: FakeWeightSensorClient,
) -> FoodEntryService:
    return FoodEntryService(repository=entry_repository, sensor_client=sensor_client)


@pytest.fixture
def booking_service(
    booking_repository: InMemoryBookingRepository,
    entry_repository: InMemoryFoodEntryRepository,
) -> BookingService:
    return BookingService(
        repository=booking_repository, entry_repository=entry_repository
    )


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    owner_id: UUID,
    sensor_client: FakeWeightSensorClient,
    entry_service: FoodEntryService,
    booking_service: BookingService,
    entry_repository: InMemoryFoodEntryRepository,
) -> AppContainer:
    identity_provider = FakeIdentityProvider(
        tokens={OWNER_TOKEN: owner_id, OTHER_TOKEN: uuid4()}
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        identity_provider=identity_provider,
        sensor_client=sensor_client,
        food_entry_service=entry_service,
        booking_service=booking_service,
        analysis_service=WasteAnalysisService(entry_repository),
        close_resources=close_resources,
    )


@pytest.fixture
def other_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {OTHER_TOKEN}"}
