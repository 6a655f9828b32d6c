"""Error Hierarchy — codes, statuses and the REST envelope."""

from organization.core.errors import (
    ConstraintViolationError, ErrorCategory, ErrorContext, ErrorSeverity,
    FormValidationError, StoreUnavailableError,
)


def test_store_unavailable_is_critical_503():
    err = StoreUnavailableError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.code == "STORE_UNAVAILABLE"
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.operation == "execute"


def test_constraint_violation_is_409_conflict():
    err = ConstraintViolationError("Integrity constraint violated", "commit")
    assert err.http_status == 409
    assert err.category == ErrorCategory.CONFLICT


def test_validation_error_keeps_user_message():
    err = FormValidationError("Name is required.", "name")
    assert err.message == "Name is required."
    assert err.http_status == 400


def test_to_response_envelope():
    err = ConstraintViolationError(
        "duplicate", "commit", ErrorContext(employee_id=3, action="update"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "CONSTRAINT_VIOLATION"
    assert body["message"] == "Store commit rejected: duplicate"
    assert body["category"] == "conflict"
    assert body["context"] == {"employee_id": 3, "action": "update"}
    assert "timestamp" in body
    assert "field" not in body


def test_validation_envelope_names_field():
    body = FormValidationError("Position is required.", "position").to_response()["error"]
    assert body["field"] == "position"
    assert body["severity"] == "warning"


def test_user_message_overrides_internal_message():
    err = StoreUnavailableError(
        "driver said no", "execute",
        ErrorContext(user_message="The database is unavailable."),
    )
    assert err.to_response()["error"]["message"] == "The database is unavailable."
