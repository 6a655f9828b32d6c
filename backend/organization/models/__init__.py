"""ORM Models — SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all runs
"""

from organization.models.employee import EmployeeRow  # noqa: F401
