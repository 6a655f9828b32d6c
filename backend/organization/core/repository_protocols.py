"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Store IO accessed through the EmployeeStore Protocol only
    - Implementation provided by the shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Not-found is a return value (None / False), not an exception: callers
      treat a vanished record as a no-op continuation
    - Failures surface as StoreUnavailableError or ConstraintViolationError
      (core/errors.py), never as driver exceptions
"""

from typing import Protocol

from organization.core.domain_types import EmployeeId
from organization.core.employee import Employee, EmployeeDraft


class EmployeeStore(Protocol):
    """Contract for employee persistence — implemented by shell."""
    async def list_all(self) -> list[Employee]: ...
    async def get_by_id(self, employee_id: EmployeeId) -> Employee | None: ...
    async def insert(self, draft: EmployeeDraft) -> Employee: ...
    async def update(self, employee: Employee) -> bool: ...
    async def delete_by_id(self, employee_id: EmployeeId) -> bool: ...
