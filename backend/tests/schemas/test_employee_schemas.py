"""Employee Schemas — HTTP boundary models.

Invariants:
    - Salary serialized as an exact decimal string
    - DraftUpdate needs at least one field and caps field length
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from organization.core.domain_types import EmployeeId, FormMode
from organization.core.employee import Employee
from organization.core.form_state import FormState
from organization.schemas.employee import (
    DraftUpdate, EmployeeResponse, FormResponse, RecordsResponse,
)


def test_employee_response_salary_is_string():
    emp = Employee(EmployeeId(3), "Ada", "Engineer", Decimal("50000.10"))
    dumped = EmployeeResponse.from_domain(emp).model_dump(mode="json")
    assert dumped == {"id": 3, "name": "Ada", "position": "Engineer", "salary": "50000.10"}


def test_records_response_keeps_order():
    employees = [
        Employee(EmployeeId(2), "Grace", "Admiral", Decimal(1)),
        Employee(EmployeeId(1), "Ada", "Engineer", Decimal(2)),
    ]
    body = RecordsResponse.from_domain(employees).model_dump(mode="json")
    assert [r["id"] for r in body["records"]] == [2, 1]


def test_form_response_from_editing_state():
    state = FormState(
        mode=FormMode.EDITING, editing_id=EmployeeId(4),
        draft_name="Ada", draft_position="Engineer", draft_salary_text="1",
    )
    form = FormResponse.from_state(state)
    assert form.mode == "editing"
    assert form.editing_id == 4
    assert form.visible is True


def test_draft_update_accepts_single_field():
    update = DraftUpdate(draft_salary_text="60000")
    assert update.draft_name is None
    assert update.draft_salary_text == "60000"


def test_draft_update_accepts_empty_string():
    assert DraftUpdate(draft_name="").draft_name == ""


def test_draft_update_rejects_empty_body():
    with pytest.raises(ValidationError):
        DraftUpdate()


def test_draft_update_caps_length():
    with pytest.raises(ValidationError):
        DraftUpdate(draft_name="x" * 201)
