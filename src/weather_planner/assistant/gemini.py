"""Language-model clients for the weather assistant."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Sequence

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from ..exceptions import AssistantError, ConfigError
from ..redaction import sanitize_text
from .models import ConversationTurn
from .prompts import EMPTY_CONVERSATION_REPLY, FALLBACK_REPLY, SYSTEM_INSTRUCTION


class ModelClient(ABC):
    """Turns an ordered conversation into the model's next reply."""

    system_instruction: str = SYSTEM_INSTRUCTION

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    @abstractmethod
    def generate(self, turns: Sequence[ConversationTurn], system_instruction: str) -> str:
        """Return generated text or raise on any failure."""

    def reply(self, turns: Sequence[ConversationTurn]) -> str:
        """Return the model's reply, or a fixed apology if the call fails."""
        if not turns:
            return EMPTY_CONVERSATION_REPLY
        try:
            return self.generate(turns, self.system_instruction)
        except Exception as exc:
            self.logger.error(
                "Assistant reply failed (%s): %s",
                type(exc).__name__,
                sanitize_text(str(exc)),
            )
            return FALLBACK_REPLY


class GeminiClient(ModelClient):
    """Client for Google Gemini via the google-genai SDK."""

    def __init__(
        self,
        api_key: str | None,
        logger: logging.Logger,
        model: str = "gemini-2.5-flash",
    ) -> None:
        super().__init__(logger)
        self.model = model
        self._client: genai.Client | None = None
        if api_key:
            self._client = genai.Client(api_key=api_key)
        else:
            self.logger.warning("GEMINI_API_KEY is not set; assistant replies are disabled")

    def generate(self, turns: Sequence[ConversationTurn], system_instruction: str) -> str:
        """Send ``turns`` with ``system_instruction`` and return the reply text.

        Raises:
            ConfigError: no API key was configured.
            AssistantError: the API rejected the request or produced no text.
        """
        if self._client is None:
            raise ConfigError("GEMINI_API_KEY must be set to use the assistant.")

        contents = [
            genai_types.Content(role=turn.role, parts=[genai_types.Part(text=turn.text)])
            for turn in turns
        ]
        start_time = time.perf_counter()
        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=contents,
                config=genai_types.GenerateContentConfig(system_instruction=system_instruction),
            )
        except genai_errors.APIError as exc:
            raise AssistantError(
                f"Gemini API error (code={exc.code}): {sanitize_text(str(exc))}"
            ) from exc

        latency_ms = int((time.perf_counter() - start_time) * 1000)
        text = response.text
        if not text:
            finish_reason = None
            if response.candidates:
                finish_reason = response.candidates[0].finish_reason
            raise AssistantError(f"Gemini returned no text (finish_reason={finish_reason}).")

        self.logger.info(
            "Assistant reply generated: model=%s turns=%d latency=%dms",
            self.model,
            len(contents),
            latency_ms,
            extra={"model": self.model},
        )
        return text
