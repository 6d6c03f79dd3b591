"""Structured Logging — JSON and text formatters sharing one set of request/store extras.

Invariants:
    - Every record carries timestamp (the record's own creation time), level, logger, message
    - Extras from LangBuddyError.log_extra() and store_operation (error_code, category,
      operation, path, username, user_id) appear only when set
    - setup_logging installs exactly one Language Buddy handler, however often it runs
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = (
    "error_code", "category", "operation", "path", "username", "user_id",
)
_HANDLER_NAME = "langbuddy"


def record_extras(record: logging.LogRecord) -> dict:
    """Known extras present on the record, in a stable order."""
    return {
        key: record.__dict__[key]
        for key in _EXTRA_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line for production log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line with extras appended as key=value."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = " ".join(f"{k}={v}" for k, v in record_extras(record).items())
        if not extras:
            return line
        first, sep, rest = line.partition("\n")
        return f"{first} [{extras}]{sep}{rest}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure the root logger; replaces a handler from an earlier call."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
