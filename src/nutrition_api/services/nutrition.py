"""Nutrition service on top of the Nutrition Tracker API."""

import logging
from dataclasses import dataclass

from nutrition_api.adapters.tracker_api_client import (
    HttpxTrackerApiClient,
    TrackerApiClient,
)
from nutrition_api.domain.errors import (
    ConfigurationError,
    NutritionApiError,
    UpstreamError,
)
from nutrition_api.domain.nutrition import CalculationEnvelope, NutrientRecord

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Service for natural-language nutrition lookups."""

    client: TrackerApiClient
    debug: bool = False

    async def calculate(self, query: str) -> dict[str, NutrientRecord]:
        """Return the total nutrients for a food description.

        An envelope without `totalNutrients` yields an empty mapping; entries
        that are not value/unit records are left out.
        """
        envelope, _ = await self._fetch(query)
        return envelope.total_nutrients

    async def calculate_full(self, query: str) -> dict[str, object]:
        """Return the full decoded API response for a food description."""
        _, raw = await self._fetch(query)
        return raw

    async def _fetch(
        self, query: str
    ) -> tuple[CalculationEnvelope, dict[str, object]]:
        text = normalize_query(query)
        try:
            raw = await self.client.calculate_natural(text)
            envelope = _parse_envelope(raw)
        except NutritionApiError as exc:
            _logger.warning(
                "Nutrition calculate failed (kind=%s, status=%s): %s",
                exc.kind.value,
                exc.status_code if exc.status_code is not None else "n/a",
                exc.message,
            )
            raise
        if self.debug:
            _logger.info(
                "Nutrition calculate: query=%s nutrients=%s",
                text,
                len(envelope.total_nutrients),
            )
        return envelope, raw


def normalize_query(query: str) -> str:
    """Trim a food description, rejecting blank input."""
    if not query or not query.strip():
        raise ConfigurationError("Food description text is required")
    return query.strip()


def _parse_envelope(raw: dict[str, object]) -> CalculationEnvelope:
    """Check the success flag of a decoded body."""
    envelope = CalculationEnvelope.model_validate(raw)
    if not envelope.success:
        raise UpstreamError(envelope.error or "Request failed")
    return envelope


async def calculate_nutrition(api_key: str, text: str) -> dict[str, NutrientRecord]:
    """Calculate nutrients without managing a client instance."""
    client = HttpxTrackerApiClient.create(api_key)
    try:
        return await NutritionService(client).calculate(text)
    finally:
        await client.close()
