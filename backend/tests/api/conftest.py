"""API test fixtures — FastAPI test client over a controller on a fake store.

Invariants:
    - get_controller overridden: routes drive a RecordListController on FakeEmployeeStore
    - get_db_manager overridden with None unless a test provides one
    - Lifespan does not run under ASGITransport, so no database is touched
"""

import pytest
from httpx import ASGITransport, AsyncClient

from organization.api.dependencies import get_controller, get_db_manager
from organization.main import app
from organization.services.record_list_controller import RecordListController
from tests.services.fake_store import FakeEmployeeStore


@pytest.fixture
def store():
    return FakeEmployeeStore()


@pytest.fixture
def controller(store):
    return RecordListController(store)


@pytest.fixture
async def client(controller):
    app.dependency_overrides[get_controller] = lambda: controller
    app.dependency_overrides[get_db_manager] = lambda: None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
