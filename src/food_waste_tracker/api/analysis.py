"""Waste analysis API endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from food_waste_tracker.api.auth import require_owner
from food_waste_tracker.api.schemas import FoodAnalysisOut, WasteShareOut

if TYPE_CHECKING:
    from food_waste_tracker.containers import AppContainer

router = APIRouter(prefix="/api/analysis", tags=["analysis"])


@router.get("/{day}")
async def analyse_day(
    day: date, request: Request, owner_id: UUID = Depends(require_owner)
) -> list[FoodAnalysisOut]:
    """Return waste metrics and recommendations for a day's dishes."""
    container: AppContainer = request.app.state.container
    rows = container.analysis_service.analyse_day(owner_id, day)
    return [FoodAnalysisOut.from_domain(row) for row in rows]


@router.get("/{day}/distribution")
async def waste_distribution(
    day: date, request: Request, owner_id: UUID = Depends(require_owner)
) -> list[WasteShareOut]:
    """Return each dish's waste percentage for a day."""
    container: AppContainer = request.app.state.container
    shares = container.analysis_service.daily_distribution(owner_id, day)
    return [WasteShareOut.from_domain(share) for share in shares]
