"""Application exception classes."""

from __future__ import annotations

from typing import Literal

FailureKind = Literal["geocoding_miss", "transport", "malformed"]


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class WeatherProviderError(Exception):
    """Raised when weather provider requests or normalization fail."""

    def __init__(
        self,
        message: str,
        *,
        kind: FailureKind = "malformed",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class AssistantError(Exception):
    """Raised when the language-model call or conversation state is invalid."""
