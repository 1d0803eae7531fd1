"""Command-line demo for the Nutrition Tracker API client."""

import asyncio
import logging

from pydantic import ValidationError

from nutrition_api.adapters.tracker_api_client import API_KEY_HINT
from nutrition_api.app_logging import configure_logging
from nutrition_api.config import Settings
from nutrition_api.containers import build_container
from nutrition_api.domain.errors import NutritionApiError
from nutrition_api.domain.nutrition import NutrientRecord
from nutrition_api.services.nutrition import NutritionService

_SIGNUP_URL = "https://rapidapi.com/anonymous617461746174/api/nutrition-tracker-api"

_logger = logging.getLogger(__name__)


def format_nutrient(name: str, record: NutrientRecord | None) -> str:
    """Render a nutrient as `name: value unit`, using N/A for missing values."""
    if record is None or record.value is None:
        value = "N/A"
    else:
        value = f"{record.value:g}"
    unit = record.unit if record is not None and record.unit else ""
    return f"{name}: {value} {unit}".rstrip()


async def run_examples(service: NutritionService) -> list[str]:
    """Run the demo queries and return the output lines."""
    lines = ["=" * 60, "Nutrition Tracker API - Python client example", "=" * 60]

    lines += ["", "Example 1: Single food item", "-" * 40]
    query = "100g grilled chicken breast"
    try:
        result = await service.calculate(query)
        lines += [f"Query: {query}", "", "Key nutrients:"]
        for name in ("Energy", "Protein", "Fat"):
            lines.append(f"  * {format_nutrient(name, result.get(name))}")
        fat = result.get("Fat")
        if fat is not None and fat.breakdown:
            lines += ["", "  Fat breakdown:"]
            for fat_type, data in fat.breakdown.items():
                lines.append(f"    - {format_nutrient(fat_type, data)}")
    except NutritionApiError as exc:
        lines.append(f"Error: {exc.message}")

    lines += ["", "Example 2: Multi-item meal", "-" * 40]
    query = "2 eggs, 100g oatmeal, and 1 banana"
    try:
        result = await service.calculate(query)
        lines += [f"Query: {query}", "", "Combined nutrients:"]
        for name in ("Energy", "Protein", "Carbohydrates", "Fiber"):
            lines.append(f"  * {format_nutrient(name, result.get(name))}")
    except NutritionApiError as exc:
        lines.append(f"Error: {exc.message}")

    lines += ["", "Example 3: All nutrients", "-" * 40]
    query = "1 apple"
    try:
        result = await service.calculate(query)
        lines += [f"Query: {query}", "", "All nutrients:"]
        for name, record in result.items():
            if record.value is not None:
                lines.append(f"  * {format_nutrient(name, record)}")
    except NutritionApiError as exc:
        lines.append(f"Error: {exc.message}")

    lines += ["", "=" * 60, f"Get your API key: {_SIGNUP_URL}", "=" * 60]
    return lines


async def _run(settings: Settings) -> None:
    container = build_container(settings)
    try:
        for line in await run_examples(container.nutrition_service):
            print(line)  # noqa: T201
    finally:
        await container.close_resources()


def main() -> None:
    """Run the demo against the live API using environment settings."""
    configure_logging()
    try:
        settings = Settings()
    except ValidationError:
        print(f"Error: {API_KEY_HINT}")  # noqa: T201
        print("Set RAPIDAPI_KEY in the environment or a .env file.")  # noqa: T201
        raise SystemExit(1) from None
    _logger.info("Starting Nutrition Tracker API demo")
    asyncio.run(_run(settings))


if __name__ == "__main__":
    main()
