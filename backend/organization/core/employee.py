"""Employee — immutable value objects passed between controller and store.

Invariants:
    - Employee.id is assigned by the store and never changes
    - EmployeeDraft only exists after validate_draft() accepted the form input
    - salary is a Decimal, never a float

Design Decisions:
    - Frozen dataclasses: the controller's cache cannot be patched in place,
      every change has to go through the store and a reload
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from organization.core.domain_types import EmployeeId


@dataclass(frozen=True)
class EmployeeDraft:
    """Validated fields of an employee that has not been persisted yet."""
    name: str
    position: str
    salary: Decimal


@dataclass(frozen=True)
class Employee:
    """One persisted employee record."""
    id: EmployeeId
    name: str
    position: str
    salary: Decimal

    def with_draft(self, draft: EmployeeDraft) -> "Employee":
        """Copy with name/position/salary taken from draft. id is preserved."""
        return replace(
            self, name=draft.name, position=draft.position, salary=draft.salary,
        )
