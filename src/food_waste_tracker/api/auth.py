"""Bearer token authentication for API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Header, HTTPException, Request, status

if TYPE_CHECKING:
    from food_waste_tracker.containers import AppContainer

_BEARER_PREFIX = "bearer "


async def require_owner(
    request: Request,
    authorization: str | None = Header(default=None),
) -> UUID:
    """Resolve the Authorization header to the calling user's id."""
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    token = authorization[len(_BEARER_PREFIX) :].strip()
    container: AppContainer = request.app.state.container
    owner_id = container.identity_provider.resolve_owner(token) if token else None
    if owner_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return owner_id
