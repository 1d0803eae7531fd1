"""Tests for the demo entrypoint."""

import asyncio

import pytest

from nutrition_api.domain.errors import UpstreamError
from nutrition_api.domain.nutrition import NutrientRecord
from nutrition_api.main import format_nutrient, main, run_examples
from nutrition_api.services.nutrition import NutritionService
from tests.conftest import FakeTrackerApiClient


def test_format_nutrient_handles_missing_values() -> None:
    assert format_nutrient("Energy", NutrientRecord(value=165, unit="kcal")) == (
        "Energy: 165 kcal"
    )
    assert format_nutrient("Fiber", None) == "Fiber: N/A"
    assert format_nutrient("Fiber", NutrientRecord(unit="g")) == "Fiber: N/A g"


def test_run_examples_prints_nutrients_and_breakdown() -> None:
    client = FakeTrackerApiClient(
        payload={
            "success": True,
            "data": {
                "totalNutrients": {
                    "Energy": {"value": 165, "unit": "kcal"},
                    "Fat": {
                        "value": 3.6,
                        "unit": "g",
                        "breakdown": {"Saturated": {"value": 1.0, "unit": "g"}},
                    },
                }
            },
        }
    )

    lines = asyncio.run(run_examples(NutritionService(client)))

    assert "Nutrition Tracker API" in lines[1]
    assert "  * Energy: 165 kcal" in lines
    assert "  * Protein: N/A" in lines
    assert "    - Saturated: 1 g" in lines
    assert client.calls == [
        "100g grilled chicken breast",
        "2 eggs, 100g oatmeal, and 1 banana",
        "1 apple",
    ]


def test_run_examples_reports_errors_and_continues() -> None:
    client = FakeTrackerApiClient(error=UpstreamError("Invalid API key", 401))

    lines = asyncio.run(run_examples(NutritionService(client)))

    assert lines.count("Error: Invalid API key") == 3
    assert len(client.calls) == 3


def test_main_without_api_key_prints_hint(monkeypatch, capsys) -> None:
    monkeypatch.setenv("RAPIDAPI_KEY", "")

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "API key is required" in captured.out
    assert "RAPIDAPI_KEY" in captured.out
