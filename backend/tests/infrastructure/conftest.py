"""Infrastructure test fixtures — real SQL store on in-memory SQLite.

Invariants:
    - Every test gets a fresh in-memory database with the schema created
    - The manager is built through its public constructor (same path as the app)
"""

import pytest

from organization.infrastructure.database import DatabaseSessionManager
from organization.infrastructure.employee_store import SqlEmployeeStore


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def sql_store(db_manager):
    return SqlEmployeeStore(db_manager)
