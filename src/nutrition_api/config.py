"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_api.adapters.tracker_api_client import (
    DEFAULT_BASE_URL,
    DEFAULT_HOST,
    DEFAULT_TIMEOUT_SECONDS,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    rapidapi_key: str = Field(min_length=1)
    nutrition_api_base_url: str = DEFAULT_BASE_URL
    nutrition_api_host: str = DEFAULT_HOST
    nutrition_api_timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
