"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import pytest

from nutrition_api.adapters.tracker_api_client import (
    HttpxTrackerApiClient,
    TrackerApiClient,
)
from nutrition_api.config import Settings
from nutrition_api.services.nutrition import NutritionService

ENERGY_ENVELOPE: dict[str, object] = {
    "success": True,
    "data": {
        "query": "100g chicken breast",
        "totalNutrients": {"Energy": {"value": 165, "unit": "kcal"}},
    },
}


@dataclass
class FakeTrackerApiClient(TrackerApiClient):
    """Fake API client that returns a fixed envelope or raises."""

    payload: dict[str, object] = field(default_factory=lambda: dict(ENERGY_ENVELOPE))
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    async def calculate_natural(self, text: str) -> dict[str, object]:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.payload


def mock_tracker_client(
    handler: Callable[[httpx.Request], object], timeout_seconds: float = 30.0
) -> HttpxTrackerApiClient:
    """Build an HTTPX client whose requests are answered by `handler`."""
    transport = httpx.MockTransport(handler)
    return HttpxTrackerApiClient(
        api_key="test-key",
        http_client=httpx.AsyncClient(transport=transport),
        base_url="https://api.test",
        host="api.test",
        timeout_seconds=timeout_seconds,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        rapidapi_key="test-key",
        nutrition_api_base_url="https://api.test",
        nutrition_api_host="api.test",
    )


@pytest.fixture
def tracker_client() -> FakeTrackerApiClient:
    return FakeTrackerApiClient()


@pytest.fixture
def nutrition_service(tracker_client: FakeTrackerApiClient) -> NutritionService:
    return NutritionService(client=tracker_client)
