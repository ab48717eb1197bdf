"""Structured Logging — JSON and text formatters sharing one set of context fields.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Context extras are exactly what stores, handlers and error handlers pass via
      extra=: theme_id, answer_id, operation, backend, error_code, path, method
    - Both formats surface the same extras; text appends them as key=value
    - setup_logging is idempotent: calling it twice never duplicates output

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

# store / handler context, then request context from the error handlers
EXTRA_KEYS = (
    "theme_id", "answer_id", "operation", "backend",
    "error_code", "path", "method",
)

_HANDLER_NAME = "ogiri"


def record_extras(record: logging.LogRecord) -> dict:
    return {
        key: record.__dict__[key] for key in EXTRA_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line for log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_extras(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Single-line development format; context extras trail the message."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        if not extras:
            return line
        head, sep, trace = line.partition("\n")
        context = " ".join(f"{k}={v}" for k, v in extras.items())
        return f"{head} [{context}]{sep}{trace}"


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install the ogiri root handler, replacing any earlier one."""
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
