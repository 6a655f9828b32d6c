"""Employee ORM — the employees table.

Invariants:
    - id is an autoincrement integer primary key, assigned on insert
    - name and position are non-nullable
    - salary is fixed-point (Numeric(18, 2)), returned as Decimal

Design Decisions:
    - Row class kept separate from core.employee.Employee: the core never sees
      ORM instances, to_domain() converts at the store boundary
"""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from organization.core.domain_types import EmployeeId
from organization.core.employee import Employee
from organization.db.base import Base


class EmployeeRow(Base):
    """One persisted employee."""
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    position: Mapped[str] = mapped_column(String(200), nullable=False)
    salary: Mapped[Decimal] = mapped_column(
        Numeric(18, 2, asdecimal=True), nullable=False,
    )

    def to_domain(self) -> Employee:
        return Employee(
            id=EmployeeId(self.id),
            name=self.name,
            position=self.position,
            salary=Decimal(self.salary),
        )
