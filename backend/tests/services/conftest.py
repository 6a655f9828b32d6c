"""Service test fixtures — controller on an in-memory fake store.

Invariants:
    - Every test gets a fresh FakeEmployeeStore and RecordListController
    - fill_form writes drafts the way bound input widgets do (direct field writes)
"""

import pytest

from organization.services.record_list_controller import RecordListController
from tests.services.fake_store import FakeEmployeeStore


@pytest.fixture
def store():
    return FakeEmployeeStore()


@pytest.fixture
def controller(store):
    return RecordListController(store)


@pytest.fixture
def fill_form():
    def _fill(controller, name="", position="", salary=""):
        controller.draft_name.value = name
        controller.draft_position.value = position
        controller.draft_salary_text.value = salary
    return _fill
