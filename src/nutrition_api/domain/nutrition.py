"""Nutrition domain models."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

_logger = logging.getLogger(__name__)


class NutrientRecord(BaseModel):
    """Value and unit for a single nutrient, with optional sub-nutrients.

    Fields the API adds beyond value/unit/breakdown are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    value: float | None = None
    unit: str | None = None
    breakdown: dict[str, "NutrientRecord"] | None = None

    @field_validator("breakdown", mode="before")
    @classmethod
    def _parse_breakdown(cls, value: object) -> object:
        if value is None:
            return None
        return parse_nutrients(value)


class CalculationEnvelope(BaseModel):
    """Outer response object returned by the API.

    Only the success flag and error message are interpreted; `data` stays raw
    so a single odd nutrient entry cannot fail the whole response.
    """

    model_config = ConfigDict(extra="allow")

    success: bool = False
    error: str | None = None
    data: dict[str, Any] | None = None

    @field_validator("success", mode="before")
    @classmethod
    def _truthy_success(cls, value: object) -> bool:
        return bool(value)

    @field_validator("error", mode="before")
    @classmethod
    def _string_error(cls, value: object) -> str | None:
        return value if isinstance(value, str) and value else None

    @field_validator("data", mode="before")
    @classmethod
    def _object_data(cls, value: object) -> dict[str, Any] | None:
        return value if isinstance(value, dict) else None

    @property
    def total_nutrients(self) -> dict[str, NutrientRecord]:
        """Nutrient records from the payload, empty when absent."""
        if self.data is None:
            return {}
        return parse_nutrients(self.data.get("totalNutrients"))


def parse_nutrients(raw: object) -> dict[str, NutrientRecord]:
    """Parse a name -> record mapping, skipping entries that are not records."""
    if not isinstance(raw, dict):
        return {}
    records: dict[str, NutrientRecord] = {}
    for name, entry in raw.items():
        if not isinstance(entry, dict):
            continue
        try:
            records[str(name)] = NutrientRecord.model_validate(entry)
        except ValidationError as exc:
            _logger.debug("Skipping nutrient %s: %s", name, exc.error_count())
    return records
