"""Error Handlers — map roster failures onto HTTP responses.

Invariants:
    - RosterError → its own envelope and status (503 store down, 409 constraint,
      400 rejected draft); the log line carries the employee/action context
    - Draft patch bodies rejected by pydantic → 400 with one detail per field
    - Anything else → 500 INTERNAL_ERROR, never leaking internal details

Design Decisions:
    - Store failures raised by the controller reach the client unchanged; the
      controller has already left records and form as they were
    - Log level follows severity: rejected drafts are warnings, store failures errors
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from organization.core.errors import ErrorCategory, ErrorSeverity, RosterError
from organization.infrastructure.observability import error_extra, log_level_for

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(RosterError, _roster_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


async def _roster_error_handler(request: Request, exc: RosterError):
    logger.log(
        log_level_for(exc),
        f"{request.method} {request.url.path} failed: {exc.message}",
        extra=error_extra(exc, path=request.url.path),
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    details = _field_details(exc)
    logger.warning(
        f"Rejected request body on {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.WARNING.value,
                "details": details,
            },
        },
    )


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path, "error_code": "INTERNAL_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _field_details(exc: RequestValidationError) -> list[dict]:
    """One entry per rejected field; 'body.' prefixes are dropped ("draft_name", not "body.draft_name")."""
    details = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        if loc and loc[0] == "body":
            loc = loc[1:]
        details.append({
            "field": ".".join(loc) or "body",
            "message": e["msg"],
            "type": e["type"],
        })
    return details
