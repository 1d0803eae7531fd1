"""Dependency container wiring for the client."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_api.adapters.tracker_api_client import (
    HttpxTrackerApiClient,
    TrackerApiClient,
)
from nutrition_api.config import Settings
from nutrition_api.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tracker_client: TrackerApiClient
    nutrition_service: NutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    tracker_client = HttpxTrackerApiClient.create(
        api_key=resolved_settings.rapidapi_key,
        base_url=resolved_settings.nutrition_api_base_url,
        host=resolved_settings.nutrition_api_host,
        timeout_seconds=resolved_settings.nutrition_api_timeout_seconds,
    )
    nutrition_service = NutritionService(
        client=tracker_client,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await tracker_client.close()

    return AppContainer(
        settings=resolved_settings,
        tracker_client=tracker_client,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
