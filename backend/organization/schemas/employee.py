"""Employee Schemas — Pydantic models for the HTTP presentation boundary.

Invariants:
    - Salaries leave the API as strings (exact decimal, no float rounding)
    - DraftUpdate only carries free text; validation of its content happens in confirm()
    - Responses are built from controller state, never from ORM rows

Design Decisions:
    - DraftUpdate fields optional: a widget patches only the field it is bound to
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_serializer, model_validator

from organization.core.employee import Employee
from organization.core.form_state import FormState


class EmployeeResponse(BaseModel):
    """One employee as rendered in the list."""
    id: int
    name: str
    position: str
    salary: Decimal

    @field_serializer("salary")
    def serialize_salary(self, salary: Decimal) -> str:
        return format(salary, "f")

    @classmethod
    def from_domain(cls, employee: Employee) -> "EmployeeResponse":
        return cls(
            id=employee.id, name=employee.name,
            position=employee.position, salary=employee.salary,
        )


class RecordsResponse(BaseModel):
    """Full employee list."""
    records: list[EmployeeResponse]

    @classmethod
    def from_domain(cls, employees) -> "RecordsResponse":
        return cls(records=[EmployeeResponse.from_domain(e) for e in employees])


class FormResponse(BaseModel):
    """Current add/edit form state."""
    mode: str
    editing_id: int | None
    visible: bool
    draft_name: str
    draft_position: str
    draft_salary_text: str
    error_message: str

    @classmethod
    def from_state(cls, state: FormState) -> "FormResponse":
        return cls(
            mode=state.mode.value,
            editing_id=state.editing_id,
            visible=state.visible,
            draft_name=state.draft_name,
            draft_position=state.draft_position,
            draft_salary_text=state.draft_salary_text,
            error_message=state.error_message,
        )


class ConfirmResponse(BaseModel):
    """Result of confirm: whether the form closed, plus both views after the call."""
    saved: bool
    form: FormResponse
    records: list[EmployeeResponse]


class DraftUpdate(BaseModel):
    """Partial write of the form's draft fields."""
    draft_name: str | None = Field(None, max_length=200)
    draft_position: str | None = Field(None, max_length=200)
    draft_salary_text: str | None = Field(None, max_length=50)

    @model_validator(mode="after")
    def require_one_field(self):
        if (
            self.draft_name is None
            and self.draft_position is None
            and self.draft_salary_text is None
        ):
            raise ValueError("draft update requires at least one field")
        return self
