"""Form State — snapshot invariants and pure transitions."""

from decimal import Decimal

import pytest

from organization.core.domain_types import EmployeeId, FormMode
from organization.core.employee import Employee, EmployeeDraft
from organization.core.form_state import (
    FormState, adding, editing, hidden, with_error,
)


def _employee():
    return Employee(
        id=EmployeeId(7), name="Ada", position="Engineer", salary=Decimal("50000"),
    )


def test_default_state_is_hidden_and_empty():
    state = FormState()
    assert state.mode == FormMode.HIDDEN
    assert not state.visible
    assert state.editing_id is None


def test_editing_requires_id():
    with pytest.raises(ValueError):
        FormState(mode=FormMode.EDITING)


def test_id_only_allowed_when_editing():
    with pytest.raises(ValueError):
        FormState(mode=FormMode.ADDING, editing_id=EmployeeId(1))


def test_adding_is_visible_with_blank_drafts():
    state = adding()
    assert state.visible
    assert state.mode == FormMode.ADDING
    assert state.draft_name == state.draft_position == state.draft_salary_text == ""


def test_editing_prefills_from_employee():
    state = editing(_employee())
    assert state.mode == FormMode.EDITING
    assert state.editing_id == 7
    assert state.draft_salary_text == "50000"


def test_with_error_keeps_everything_else():
    base = editing(_employee())
    state = with_error(base, "Name is required.")
    assert state.error_message == "Name is required."
    assert state.mode == base.mode
    assert state.draft_name == base.draft_name


def test_hidden_clears_error():
    assert hidden().error_message == ""
    assert hidden() == FormState()


def test_employee_with_draft_preserves_id():
    updated = _employee().with_draft(EmployeeDraft("Grace", "Admiral", Decimal("1")))
    assert updated.id == 7
    assert updated.name == "Grace"
    assert updated.salary == 1
