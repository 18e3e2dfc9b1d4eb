"""Logging setup for command-line execution."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any

from .redaction import sanitize_text

# httpx logs every request line at INFO; the Gemini SDK logs retries and warnings.
LIBRARY_LOGGERS = ("httpx", "httpcore", "google_genai")

# Structured context passed through ``extra=`` by the weather and assistant layers.
CONTEXT_FIELDS = ("city", "kind", "source", "model")


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per record, with credentials scrubbed from every string."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize_text(record.getMessage()),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                event[field] = sanitize_text(str(value))
        if record.exc_info:
            event["exception"] = sanitize_text(self.formatException(record.exc_info))
        return json.dumps(event, default=str)


def setup_logger(
    name: str = "weather_planner",
    level: int | str = logging.INFO,
    *,
    library_level: int | str = logging.WARNING,
) -> logging.Logger:
    """Create the application logger, or re-level it when called again.

    ``level`` accepts the ``LOG_LEVEL`` setting as-is. The JSON handler is
    installed once; later calls only adjust levels. Library loggers are held
    at ``library_level`` so request chatter does not crowd the dashboard.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    for library in LIBRARY_LOGGERS:
        logging.getLogger(library).setLevel(library_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(JsonConsoleFormatter())
        logger.addHandler(handler)
    return logger
