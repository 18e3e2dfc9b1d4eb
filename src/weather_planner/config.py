"""Typed settings loader for the weather planner."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AnyHttpUrl, Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_env: Literal["dev", "staging", "prod"] = Field(default="dev", alias="APP_ENV")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    gemini_api_key: str | None = Field(default=None, alias="GEMINI_API_KEY", repr=False)
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")

    geocoding_url: AnyHttpUrl = Field(
        default="https://geocoding-api.open-meteo.com/v1/search",
        alias="GEOCODING_URL",
    )
    forecast_url: AnyHttpUrl = Field(
        default="https://api.open-meteo.com/v1/forecast",
        alias="FORECAST_URL",
    )
    archive_url: AnyHttpUrl = Field(
        default="https://archive-api.open-meteo.com/v1/archive",
        alias="ARCHIVE_URL",
    )
    weather_user_agent: str = Field(
        default="weather-planner/0.1 (contact: planner@example.com)",
        alias="WEATHER_USER_AGENT",
    )
    weather_timeout_seconds: float = Field(default=15.0, alias="WEATHER_TIMEOUT_SECONDS")
    mock_latency_seconds: float = Field(default=0.5, alias="MOCK_LATENCY_SECONDS")
    default_city: str = Field(default="Honolulu", alias="DEFAULT_CITY")

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat an empty env-string key as unset."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_ranges(self) -> Settings:
        """Validate numeric ranges and required strings."""
        if not self.gemini_model.strip():
            raise ValueError("GEMINI_MODEL must not be empty.")
        if not self.weather_user_agent.strip():
            raise ValueError("WEATHER_USER_AGENT must not be empty.")
        if self.weather_timeout_seconds <= 0:
            raise ValueError("WEATHER_TIMEOUT_SECONDS must be > 0.")
        if self.mock_latency_seconds < 0:
            raise ValueError("MOCK_LATENCY_SECONDS must be >= 0.")
        if not self.default_city.strip():
            raise ValueError("DEFAULT_CITY must not be empty.")
        return self

    @property
    def assistant_configured(self) -> bool:
        return self.gemini_api_key is not None

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging (no credentials)."""
        return {
            "app_env": self.app_env,
            "log_level": self.log_level,
            "gemini_model": self.gemini_model,
            "assistant_configured": self.assistant_configured,
            "geocoding_url": str(self.geocoding_url),
            "forecast_url": str(self.forecast_url),
            "archive_url": str(self.archive_url),
            "weather_timeout_seconds": self.weather_timeout_seconds,
            "mock_latency_seconds": self.mock_latency_seconds,
            "default_city": self.default_city,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
