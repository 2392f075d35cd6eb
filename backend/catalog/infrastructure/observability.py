"""Structured Logging — catalog log records in JSON or key=value text.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Catalog context fields (entry_id, record_id, operation, ...) surfaced when present
    - Both formats surface the same context fields, in CONTEXT_KEYS order
    - setup_logging replaces its own handler on re-run, never stacks a second one

Design Decisions:
    - Formatters on stdlib logging: no extra dependency
    - Handler tagged with an attribute so foreign root handlers are left alone
"""

import logging
import json
from datetime import datetime, timezone

CONTEXT_KEYS = (
    "operation", "entry_id", "record_id", "category",
    "removed_count", "error_code", "path",
)

_HANDLER_TAG = "_catalog_handler"


def record_context(record: logging.LogRecord) -> dict:
    """Catalog context fields set via `extra=`, in CONTEXT_KEYS order."""
    return {
        key: record.__dict__[key]
        for key in CONTEXT_KEYS
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per record; context fields flattened alongside message."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **record_context(record),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class ContextTextFormatter(logging.Formatter):
    """Human-readable line with catalog context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        ctx = record_context(record)
        if not ctx:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in ctx.items())
        head, sep, tail = line.partition("\n")  # keep tracebacks below the pairs
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the catalog handler on the root logger, replacing a previous one."""
    root = logging.root
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_TAG, False):
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    setattr(handler, _HANDLER_TAG, True)
    handler.setFormatter(JSONFormatter() if fmt == "json" else ContextTextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
