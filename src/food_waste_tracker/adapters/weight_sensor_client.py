"""HTTP client for the networked kitchen scale."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from food_waste_tracker.errors import SensorUnavailableError

_logger = logging.getLogger(__name__)


class WeightSensorClient(Protocol):
    """Interface for reading the current scale weight."""

    async def read_weight(self) -> float:
        """Return the weight currently on the scale in kilograms."""


@dataclass
class HttpxWeightSensorClient(WeightSensorClient):
    """HTTPX-backed scale client calling ``GET <base_url>/weight``."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 5.0

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 5.0
    ) -> "HttpxWeightSensorClient":
        """Create a sensor client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def read_weight(self) -> float:
        """Fetch one reading; any failure raises SensorUnavailableError."""
        url = f"{self.base_url.rstrip('/')}/weight"
        try:
            response = await self.http_client.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning("Weight sensor request failed: url=%s error=%s", url, exc)
            raise SensorUnavailableError("Failed to fetch weight from sensor") from exc
        weight = payload.get("weight") if isinstance(payload, dict) else None
        if isinstance(weight, bool) or not isinstance(weight, int | float):
            _logger.warning("Weight sensor returned unexpected payload: %r", payload)
            raise SensorUnavailableError("Weight sensor returned an invalid reading")
        return float(weight)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
