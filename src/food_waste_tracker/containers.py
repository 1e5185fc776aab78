"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_waste_tracker.adapters.identity_provider import (
    IdentityProvider,
    SupabaseIdentityProvider,
)
from food_waste_tracker.adapters.supabase_booking_repository import (
    SupabaseBookingRepository,
)
from food_waste_tracker.adapters.supabase_food_entry_repository import (
    SupabaseFoodEntryRepository,
)
from food_waste_tracker.adapters.weight_sensor_client import (
    HttpxWeightSensorClient,
    WeightSensorClient,
)
from food_waste_tracker.config import Settings
from food_waste_tracker.services.analysis import WasteAnalysisService
from food_waste_tracker.services.bookings import BookingService
from food_waste_tracker.services.entries import FoodEntryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    identity_provider: IdentityProvider
    sensor_client: WeightSensorClient
    food_entry_service: FoodEntryService
    booking_service: BookingService
    analysis_service: WasteAnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    entry_repository = SupabaseFoodEntryRepository(supabase_client)
    booking_repository = SupabaseBookingRepository(supabase_client)
    sensor_client = HttpxWeightSensorClient.create(
        base_url=resolved_settings.weight_sensor_base_url,
        timeout_seconds=resolved_settings.weight_sensor_timeout_seconds,
    )
    food_entry_service = FoodEntryService(
        repository=entry_repository,
        sensor_client=sensor_client,
    )
    booking_service = BookingService(
        repository=booking_repository,
        entry_repository=entry_repository,
    )
    analysis_service = WasteAnalysisService(entry_repository)

    async def close_resources() -> None:
        await sensor_client.close()

    return AppContainer(
        settings=resolved_settings,
        identity_provider=SupabaseIdentityProvider(supabase_client),
        sensor_client=sensor_client,
        food_entry_service=food_entry_service,
        booking_service=booking_service,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
