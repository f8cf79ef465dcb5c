"""
Structured logging configuration.

Provides JSON-formatted logging for hosts that collect provider logs
and a plain format for interactive use. Fields passed through
``extra={...}`` are carried into the JSON entry; values of sensitive
fields are masked.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Optional

import requests

STRUCTURED_FIELDS = (
    "workspace_id",
    "user",
    "password",
    "object_id",
    "schema_id",
    "url",
    "status_code",
    "headers",
    "body",
    "success",
)

MASKED_FIELDS = frozenset({"password"})
MASK = "***"


class StructuredFormatter(logging.Formatter):
    """JSON-structured log formatter for machine-readable output."""

    def __init__(self, masked_fields: frozenset[str] = MASKED_FIELDS):
        super().__init__()
        self.masked_fields = masked_fields

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
        }

        for key in STRUCTURED_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                log_entry[key] = MASK if key in self.masked_fields else value

        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class MaskingFilter(logging.Filter):
    """Mask sensitive structured fields before any handler sees them."""

    def __init__(self, masked_fields: frozenset[str] = MASKED_FIELDS):
        super().__init__()
        self.masked_fields = masked_fields

    def filter(self, record: logging.LogRecord) -> bool:
        for key in self.masked_fields:
            if getattr(record, key, None) is not None:
                setattr(record, key, MASK)
        return True


def response_fields(response: Optional[requests.Response]) -> dict:
    """Request/response context for an error log entry."""
    if response is None:
        return {}

    request = getattr(response, "request", None)
    url = request.url if request is not None and request.url else response.url
    return {
        "url": url,
        "status_code": response.status_code,
        "headers": dict(response.headers),
        "body": response.text,
    }


def log_response_error(logger: logging.Logger, message: str, response: Optional[requests.Response]) -> None:
    """Log a failed Assets call with its URL, status code, headers and body."""
    if response is None:
        return
    logger.error(message, extra=response_fields(response))


def setup_structured_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure logging for the provider.

    Args:
        level: Log level (TRACE is treated as DEBUG)
        json_output: If True, use JSON format; otherwise use simple format
    """
    level = level.upper()
    if level == "TRACE":
        level = "DEBUG"
    log_level = getattr(logging, level, logging.INFO)

    handler = logging.StreamHandler()
    handler.addFilter(MaskingFilter())
    if json_output:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logging.root.handlers = [handler]
    logging.root.setLevel(log_level)
