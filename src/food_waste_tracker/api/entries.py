"""Food entry API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from food_waste_tracker.api.auth import require_owner
from food_waste_tracker.api.schemas import (
    FoodEntriesCreate,
    FoodEntryOut,
    RemainingWeightUpdate,
)
from food_waste_tracker.domain.entries import KNOWN_FOOD_ITEMS

if TYPE_CHECKING:
    from food_waste_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["food-entries"])


@router.get("/food-items")
async def list_food_items() -> dict[str, list[str]]:
    """Return the dishes offered as choices on entry forms."""
    return {"food_items": list(KNOWN_FOOD_ITEMS)}


@router.post("/food-entries", status_code=status.HTTP_201_CREATED)
async def create_food_entries(
    payload: FoodEntriesCreate,
    request: Request,
    owner_id: UUID = Depends(require_owner),
) -> list[FoodEntryOut]:
    """Record the initial weights of the dishes of one meal."""
    container: AppContainer = request.app.state.container
    entries = container.food_entry_service.create_entries(
        payload.date,
        payload.meal_type,
        [(item.food_item, item.initial_weight) for item in payload.items],
        owner_id,
    )
    return [FoodEntryOut.from_domain(entry) for entry in entries]


@router.get("/food-entries")
async def list_food_entries(
    request: Request,
    search: str | None = None,
    sort_field: str = "date",
    sort_direction: str = "desc",
    owner_id: UUID = Depends(require_owner),
) -> list[FoodEntryOut]:
    """Return the caller's entries, searchable and sortable."""
    container: AppContainer = request.app.state.container
    entries = container.food_entry_service.list_all(
        owner_id,
        search=search,
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
    return [FoodEntryOut.from_domain(entry) for entry in entries]


@router.get("/food-entries/pending")
async def list_pending_entries(
    request: Request, owner_id: UUID = Depends(require_owner)
) -> list[FoodEntryOut]:
    """Return entries still waiting for their remaining weight."""
    container: AppContainer = request.app.state.container
    entries = container.food_entry_service.list_pending(owner_id)
    return [FoodEntryOut.from_domain(entry) for entry in entries]


@router.patch("/food-entries/{entry_id}/remaining-weight")
async def set_remaining_weight(
    entry_id: UUID,
    payload: RemainingWeightUpdate,
    request: Request,
    owner_id: UUID = Depends(require_owner),
) -> FoodEntryOut:
    """Record the leftover weight of an entry."""
    container: AppContainer = request.app.state.container
    entry = container.food_entry_service.set_remaining_weight(
        entry_id, payload.remaining_weight, owner_id
    )
    return FoodEntryOut.from_domain(entry)


@router.post("/food-entries/{entry_id}/remaining-weight/sensor")
async def record_remaining_from_sensor(
    entry_id: UUID, request: Request, owner_id: UUID = Depends(require_owner)
) -> FoodEntryOut:
    """Record the current scale reading as the leftover weight."""
    container: AppContainer = request.app.state.container
    entry = await container.food_entry_service.record_remaining_from_sensor(
        entry_id, owner_id
    )
    return FoodEntryOut.from_domain(entry)


@router.delete("/food-entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_food_entry(
    entry_id: UUID, request: Request, owner_id: UUID = Depends(require_owner)
) -> None:
    """Delete an entry."""
    container: AppContainer = request.app.state.container
    container.food_entry_service.delete_entry(entry_id, owner_id)
