"""Structured Logging — JSON formatter, roster log fields and logging setup.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Roster fields (employee_id, action, mode, field, error_code, operation, path)
      are emitted only when present on the record
    - error_extra() is the single translation from a RosterError to log fields;
      the controller and the HTTP handlers both log through it
    - setup_logging() is idempotent: calling it again replaces its own handler

Design Decisions:
    - JSONFormatter on stdlib logging, JSON in production and text in development
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

from organization.core.errors import ErrorSeverity, FormValidationError, RosterError

_EXTRA_FIELDS = (
    "employee_id", "action", "mode", "field",
    "error_code", "operation", "path",
)

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def error_extra(exc: RosterError, **fields) -> dict:
    """Log fields for a RosterError: its code plus whatever its context carries.

    Explicit keyword fields win over the error's own context.
    """
    extra: dict = {"error_code": exc.code}
    if exc.context.employee_id is not None:
        extra["employee_id"] = exc.context.employee_id
    if exc.context.action is not None:
        extra["action"] = exc.context.action
    operation = getattr(exc, "operation", None)
    if operation is not None:
        extra["operation"] = operation
    if isinstance(exc, FormValidationError):
        extra["field"] = exc.field
    extra.update({k: v for k, v in fields.items() if v is not None})
    return extra


def log_level_for(exc: RosterError) -> int:
    """WARNING-severity errors (rejected drafts) log as warnings, the rest as errors."""
    if exc.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING):
        return logging.WARNING
    return logging.ERROR


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        # FormMode and EmployeeId values are not JSON-native
        return json.dumps(log, ensure_ascii=False, default=str)


class _RosterHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure the root logger for the roster service."""
    handler = _RosterHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    for existing in list(logging.root.handlers):
        if isinstance(existing, _RosterHandler):
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
