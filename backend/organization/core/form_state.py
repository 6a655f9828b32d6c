"""Form State — immutable snapshot of the add/edit form and its pure transitions.

Invariants:
    - editing_id is set iff mode == EDITING
    - visible is derived from mode (never stored separately)
    - Every transition returns a new FormState; nothing mutates in place

Design Decisions:
    - Frozen dataclass + transition functions: the controller computes the next
      snapshot here and publishes it in one batch, so the state machine is
      testable without observers or a store
"""

from dataclasses import dataclass, replace

from organization.core.domain_types import EmployeeId, FormMode
from organization.core.employee import Employee
from organization.core.validate_draft import format_salary


@dataclass(frozen=True)
class FormState:
    """Per-controller form state — pure dataclass, no IO."""

    mode: FormMode = FormMode.HIDDEN
    editing_id: EmployeeId | None = None

    # Free text bound to input widgets (unvalidated)
    draft_name: str = ""
    draft_position: str = ""
    draft_salary_text: str = ""

    # Empty when no validation error is active
    error_message: str = ""

    def __post_init__(self):
        if (self.mode == FormMode.EDITING) != (self.editing_id is not None):
            raise ValueError("editing_id must be set exactly when mode is EDITING")

    @property
    def visible(self) -> bool:
        return self.mode != FormMode.HIDDEN


def hidden() -> FormState:
    """Closed form with cleared drafts. Result of cancel and successful confirm."""
    return FormState()


def adding() -> FormState:
    """Empty form opened for a new employee."""
    return FormState(mode=FormMode.ADDING)


def editing(employee: Employee) -> FormState:
    """Form opened on an existing employee, drafts prefilled from it."""
    return FormState(
        mode=FormMode.EDITING,
        editing_id=employee.id,
        draft_name=employee.name,
        draft_position=employee.position,
        draft_salary_text=format_salary(employee.salary),
    )


def with_error(state: FormState, message: str) -> FormState:
    """Same form with a validation message. Mode and drafts are kept."""
    return replace(state, error_message=message)
