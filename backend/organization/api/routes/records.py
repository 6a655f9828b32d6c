"""Records — the employee list and the actions that mutate it through the controller.

Invariants:
    - Every response is built from controller.records after the action completed
    - Deleting an id that is already gone is a 200, not a 404
    - Store failures surface as the RosterError envelope (503 / 409) via error_handlers
"""

import logging

from fastapi import APIRouter, Depends

from organization.api.dependencies import get_controller
from organization.core.domain_types import EmployeeId
from organization.schemas.employee import RecordsResponse
from organization.services.record_list_controller import RecordListController

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/records", tags=["records"])


@router.get("", response_model=RecordsResponse)
async def list_records(
    controller: RecordListController = Depends(get_controller),
):
    """Current cached list (no store round trip)."""
    return RecordsResponse.from_domain(controller.records.value)


@router.post("/reload", response_model=RecordsResponse)
async def reload_records(
    controller: RecordListController = Depends(get_controller),
):
    """Re-read the full list from the store."""
    await controller.reload()
    return RecordsResponse.from_domain(controller.records.value)


@router.delete("/{employee_id}", response_model=RecordsResponse)
async def remove_record(
    employee_id: int,
    controller: RecordListController = Depends(get_controller),
):
    """Delete an employee, then return the reloaded list."""
    await controller.remove(EmployeeId(employee_id))
    return RecordsResponse.from_domain(controller.records.value)
