"""Error Hierarchy — typed, categorized exceptions for catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Core store operations never raise: unknown ids are no-ops
    - Errors are raised only at the shell boundary (upstream checks, startup load)
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with CatalogError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFLICT = "conflict"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entry_id: str | None = None
    record_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog workspace errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entry_id": self.context.entry_id,
                    "record_id": self.context.record_id,
                    "operation": self.context.operation,
                },
            }
        }

    def log_extra(self) -> dict[str, str]:
        """Structured logging fields: error code plus the non-empty context ids."""
        extra = {"error_code": self.code}
        for key in ("entry_id", "record_id", "operation"):
            val = getattr(self.context, key)
            if val is not None:
                extra[key] = val
        return extra


# ─── Domain Errors (400-level) ──────────────────────────────────

class DuplicateEntryError(CatalogError):
    """An entry with this id is already live in the catalog."""
    def __init__(self, entry_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entry_id = entry_id
        super().__init__(
            f"Catalog entry '{entry_id}' already exists",
            "DUPLICATE_ENTRY", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.entry_id = entry_id


# ─── Configuration Errors (500-level) ───────────────────────────

class SnapshotFormatError(CatalogError):
    """Initial workspace snapshot could not be read or parsed."""
    def __init__(self, message: str, source: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid workspace snapshot ({source}): {message}",
            "SNAPSHOT_FORMAT_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.source = source
