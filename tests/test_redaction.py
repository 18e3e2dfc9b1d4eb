"""Tests for credential redaction and the JSON log formatter."""

from __future__ import annotations

import json
import logging

from weather_planner.log_setup import JsonConsoleFormatter, setup_logger
from weather_planner.redaction import REDACTED, sanitize_text

GOOGLE_KEY = "AIza" + "B" * 35


def test_google_api_key_is_redacted() -> None:
    text = sanitize_text(f"request failed for {GOOGLE_KEY} today")

    assert GOOGLE_KEY not in text
    assert REDACTED in text


def test_key_value_and_bearer_secrets_are_redacted() -> None:
    text = sanitize_text(
        "url=https://x?api_key=abc123&q=1 x-goog-api-key: zzz Authorization: Bearer tok.en"
    )

    assert "abc123" not in text
    assert "zzz" not in text
    assert "tok.en" not in text
    assert "q=1" in text


def test_plain_text_is_unchanged() -> None:
    message = "Live current weather unavailable for Honolulu (transport): timeout"
    assert sanitize_text(message) == message


def test_generic_key_value_text_is_not_redacted() -> None:
    message = "cache key: honolulu, sort key=date"
    assert sanitize_text(message) == message


def test_google_key_in_query_string_is_redacted() -> None:
    text = sanitize_text(f"GET https://example.test/v1?key={GOOGLE_KEY}")

    assert GOOGLE_KEY not in text
    assert text.endswith(f"key={REDACTED}")


def test_json_formatter_sanitizes_message() -> None:
    record = logging.LogRecord(
        name="weather_planner",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Gemini failed with key %s",
        args=(GOOGLE_KEY,),
        exc_info=None,
    )

    event = json.loads(JsonConsoleFormatter().format(record))

    assert event["level"] == "WARNING"
    assert event["logger"] == "weather_planner"
    assert GOOGLE_KEY not in event["message"]
    assert "ts" in event


def test_json_formatter_emits_context_fields() -> None:
    record = logging.LogRecord(
        name="weather_planner",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Live history unavailable",
        args=(),
        exc_info=None,
    )
    record.city = "Honolulu"
    record.kind = "transport"
    record.source = "mock"

    event = json.loads(JsonConsoleFormatter().format(record))

    assert event["city"] == "Honolulu"
    assert event["kind"] == "transport"
    assert event["source"] == "mock"
    assert "model" not in event


def test_setup_logger_installs_one_handler_and_relevels() -> None:
    logger = setup_logger("weather_planner_test_logger")
    again = setup_logger("weather_planner_test_logger", level="DEBUG")

    assert logger is again
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonConsoleFormatter)
    assert logger.propagate is False
    assert logger.level == logging.DEBUG


def test_setup_logger_quiets_library_loggers() -> None:
    setup_logger("weather_planner_test_libraries", level="DEBUG")

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("google_genai").level == logging.WARNING
