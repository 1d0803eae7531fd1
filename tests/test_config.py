"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from nutrition_api.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.setenv("RAPIDAPI_KEY", "env-key")
    monkeypatch.delenv("NUTRITION_API_BASE_URL", raising=False)
    monkeypatch.delenv("NUTRITION_API_TIMEOUT_SECONDS", raising=False)

    settings = Settings()

    assert settings.rapidapi_key == "env-key"
    assert settings.nutrition_api_base_url == (
        "https://nutrition-tracker-api.p.rapidapi.com"
    )
    assert settings.nutrition_api_host == "nutrition-tracker-api.p.rapidapi.com"
    assert settings.nutrition_api_timeout_seconds == 30.0


def test_settings_reject_empty_key() -> None:
    with pytest.raises(ValidationError):
        Settings(rapidapi_key="")
