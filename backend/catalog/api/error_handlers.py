"""Error Handlers — map catalog failures to the JSON error envelope.

Invariants:
    - CatalogError → its own to_response() body; context ids go to the log record
    - 4xx catalog errors log at WARNING, 5xx at ERROR
    - A path segment that is not a RecycleCategory gets UNKNOWN_RECYCLE_CATEGORY
    - Other request validation failures → VALIDATION_ERROR with field details
    - Anything else → INTERNAL_ERROR without internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from catalog.core.domain_types import RecycleCategory
from catalog.core.errors import CatalogError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

_RECYCLE_CATEGORIES = ", ".join(c.value for c in RecycleCategory)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity, **fields,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **fields,
        },
    }


async def catalog_error_handler(request: Request, exc: CatalogError):
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        extra={**exc.log_extra(), "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _bad_recycle_category(errors: list[dict]) -> str | None:
    """The rejected category segment, if that is what failed validation."""
    for e in errors:
        if tuple(e["loc"]) == ("path", "category"):
            return str(e.get("input"))
    return None


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    category = _bad_recycle_category(errors)
    if category is not None:
        logger.warning(
            f"Unknown recycle category '{category}'",
            extra={"category": category, "operation": "restore", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_envelope(
                "UNKNOWN_RECYCLE_CATEGORY",
                f"Recycle category must be one of: {_RECYCLE_CATEGORIES}",
                ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
                category_value=category,
            ),
        )

    logger.warning(
        f"Invalid request on {request.url.path}: {len(errors)} error(s)",
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=[
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in errors
            ],
        ),
    )


async def internal_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
