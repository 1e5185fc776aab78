"""Helpers shared by the Supabase repositories."""

from typing import Any, Protocol

import httpx
from postgrest.exceptions import APIError

from food_waste_tracker.errors import PersistenceError


class _Executable(Protocol):
    def execute(self) -> Any:
        """Run the query."""


def execute(query: _Executable, action: str) -> list[dict[str, Any]]:
    """Run a PostgREST query and return its rows.

    PostgREST and transport failures are re-raised as PersistenceError.
    """
    try:
        response = query.execute()
    except APIError as exc:
        raise PersistenceError(f"Failed to {action}: {exc.message}") from exc
    except httpx.HTTPError as exc:
        raise PersistenceError(f"Failed to {action}: {exc}") from exc
    return response.data or []
