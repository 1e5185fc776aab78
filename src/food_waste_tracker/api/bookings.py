"""Booking API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from food_waste_tracker.api.auth import require_owner
from food_waste_tracker.api.schemas import BookingCreate, BookingOut, FoodEntryOut

if TYPE_CHECKING:
    from food_waste_tracker.containers import AppContainer

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


@router.get("/available")
async def list_available_food(
    request: Request, owner_id: UUID = Depends(require_owner)
) -> list[FoodEntryOut]:
    """Return entries with leftovers that can be booked."""
    container: AppContainer = request.app.state.container
    entries = container.booking_service.list_available(owner_id)
    return [FoodEntryOut.from_domain(entry) for entry in entries]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(
    payload: BookingCreate,
    request: Request,
    owner_id: UUID = Depends(require_owner),
) -> BookingOut:
    """Book the leftovers of a food entry for a trust."""
    container: AppContainer = request.app.state.container
    detail = container.booking_service.create_booking(
        food_entry_id=payload.food_entry_id,
        person_name=payload.person_name,
        contact_number=payload.contact_number,
        trust_name=payload.trust_name,
        owner_id=owner_id,
    )
    return BookingOut.from_domain(detail)


@router.get("")
async def list_bookings(
    request: Request, owner_id: UUID = Depends(require_owner)
) -> list[BookingOut]:
    """Return the caller's bookings with their food entries."""
    container: AppContainer = request.app.state.container
    details = container.booking_service.list_bookings(owner_id)
    return [BookingOut.from_domain(detail) for detail in details]
