"""Nutrition Tracker API (RapidAPI) client."""

import asyncio
from dataclasses import dataclass
from typing import Protocol

import httpx

from nutrition_api.domain.errors import (
    ConfigurationError,
    RequestTimeoutError,
    UnexpectedError,
    UpstreamError,
)

DEFAULT_BASE_URL = "https://nutrition-tracker-api.p.rapidapi.com"
DEFAULT_HOST = "nutrition-tracker-api.p.rapidapi.com"
DEFAULT_TIMEOUT_SECONDS = 30.0
TIMEOUT_STATUS_CODE = 408

API_KEY_HINT = (
    "API key is required. Get yours at: "
    "https://rapidapi.com/anonymous617461746174/api/nutrition-tracker-api"
)


class TrackerApiClient(Protocol):
    """Interface for Nutrition Tracker API interactions."""

    async def calculate_natural(self, text: str) -> dict[str, object]:
        """Send a natural-language query and return the decoded envelope."""


@dataclass(frozen=True)
class HttpxTrackerApiClient(TrackerApiClient):
    """HTTPX-backed Nutrition Tracker API client."""

    api_key: str
    http_client: httpx.AsyncClient
    base_url: str = DEFAULT_BASE_URL
    host: str = DEFAULT_HOST
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        _require_api_key(self.api_key)

    @classmethod
    def create(
        cls,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        host: str = DEFAULT_HOST,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "HttpxTrackerApiClient":
        """Create a client with a managed httpx session."""
        _require_api_key(api_key)
        return cls(
            api_key=api_key,
            http_client=httpx.AsyncClient(),
            base_url=base_url,
            host=host,
            timeout_seconds=timeout_seconds,
        )

    @property
    def headers(self) -> dict[str, str]:
        """Headers required by RapidAPI."""
        return {
            "Content-Type": "application/json",
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.host,
        }

    async def calculate_natural(self, text: str) -> dict[str, object]:
        """POST a food description to the natural-language endpoint.

        Returns the decoded JSON body of a 2xx response. The success flag
        inside the body is left for the caller to interpret.
        """
        url = f"{self.base_url}/v1/calculate/natural"
        try:
            async with asyncio.timeout(self.timeout_seconds):
                response = await self.http_client.post(
                    url,
                    headers=self.headers,
                    json={"text": text},
                    timeout=self.timeout_seconds,
                )
        except (TimeoutError, httpx.TimeoutException) as exc:
            raise RequestTimeoutError(
                "Request timed out", status_code=TIMEOUT_STATUS_CODE
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise UnexpectedError(f"Request failed: {exc}") from exc

        if not response.is_success:
            message = _error_message(response) or "Unknown error occurred"
            raise UpstreamError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise UnexpectedError(f"Request failed: {exc}") from exc
        if not isinstance(payload, dict):
            raise UnexpectedError("Request failed: response body is not a JSON object")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _require_api_key(api_key: str) -> None:
    """Reject a missing or blank credential."""
    if not api_key or not api_key.strip():
        raise ConfigurationError(API_KEY_HINT)


def _error_message(response: httpx.Response) -> str | None:
    """Extract the `error` field from an error response body, if present."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, str) and error:
        return error
    return None
