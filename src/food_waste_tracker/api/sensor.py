"""Weight sensor API endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from food_waste_tracker.api.auth import require_owner
from food_waste_tracker.api.schemas import WeightReading

if TYPE_CHECKING:
    from food_waste_tracker.containers import AppContainer

router = APIRouter(prefix="/api/sensor", tags=["sensor"])


@router.get("/weight", dependencies=[Depends(require_owner)])
async def read_weight(request: Request) -> WeightReading:
    """Return the weight currently on the kitchen scale."""
    container: AppContainer = request.app.state.container
    return WeightReading(weight=await container.sensor_client.read_weight())
