"""SQL Employee Store — EmployeeStore implementation on the async session manager.

Invariants:
    - One DB session per call; nothing is cached between calls
    - list_all() orders by id, i.e. insertion order
    - Not-found is reported as None / False, never raised
    - Driver failures arrive as StoreUnavailableError / ConstraintViolationError
      (mapped by DatabaseSessionManager.session()) whose context names the store
      action and, where there is one, the employee id
"""

import logging

from sqlalchemy import delete, select

from organization.core.domain_types import EmployeeId
from organization.core.employee import Employee, EmployeeDraft
from organization.core.errors import ErrorContext
from organization.infrastructure.database import DatabaseSessionManager
from organization.models.employee import EmployeeRow

logger = logging.getLogger(__name__)


class SqlEmployeeStore:
    """Employee persistence backed by SQLAlchemy."""

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    def _session(self, action: str, employee_id: EmployeeId | None = None):
        return self._db.session(
            ErrorContext(employee_id=employee_id, action=action),
        )

    async def list_all(self) -> list[Employee]:
        async with self._session("list_all") as db:
            result = await db.execute(select(EmployeeRow).order_by(EmployeeRow.id))
            return [row.to_domain() for row in result.scalars().all()]

    async def get_by_id(self, employee_id: EmployeeId) -> Employee | None:
        async with self._session("get_by_id", employee_id) as db:
            row = await db.get(EmployeeRow, employee_id)
            return row.to_domain() if row else None

    async def insert(self, draft: EmployeeDraft) -> Employee:
        async with self._session("insert") as db:
            row = EmployeeRow(
                name=draft.name, position=draft.position, salary=draft.salary,
            )
            db.add(row)
            await db.commit()
            await db.refresh(row)
            logger.debug("Inserted employee", extra={"employee_id": row.id})
            return row.to_domain()

    async def update(self, employee: Employee) -> bool:
        async with self._session("update", employee.id) as db:
            row = await db.get(EmployeeRow, employee.id)
            if row is None:
                return False
            row.name = employee.name
            row.position = employee.position
            row.salary = employee.salary
            await db.commit()
            return True

    async def delete_by_id(self, employee_id: EmployeeId) -> bool:
        async with self._session("delete_by_id", employee_id) as db:
            result = await db.execute(
                delete(EmployeeRow).where(EmployeeRow.id == employee_id),
            )
            await db.commit()
            return result.rowcount > 0
