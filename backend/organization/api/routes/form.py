"""Form — add/edit form actions bound to the controller's named operations.

Invariants:
    - Each route maps to exactly one controller action (or the draft field binding)
    - Validation failures are a 200 with form.error_message set, not an HTTP error
    - Draft patches write only the fields present in the body
"""

import logging

from fastapi import APIRouter, Depends

from organization.api.dependencies import get_controller
from organization.core.domain_types import EmployeeId
from organization.schemas.employee import (
    ConfirmResponse, DraftUpdate, EmployeeResponse, FormResponse,
)
from organization.services.record_list_controller import RecordListController

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/form", tags=["form"])


def _form(controller: RecordListController) -> FormResponse:
    return FormResponse.from_state(controller.form_state)


@router.get("", response_model=FormResponse)
async def get_form(controller: RecordListController = Depends(get_controller)):
    return _form(controller)


@router.post("/add", response_model=FormResponse)
async def begin_add(controller: RecordListController = Depends(get_controller)):
    controller.begin_add()
    return _form(controller)


@router.post("/edit/{employee_id}", response_model=FormResponse)
async def begin_edit(
    employee_id: int,
    controller: RecordListController = Depends(get_controller),
):
    """Open the form on an employee. Unknown ids leave the form unchanged."""
    controller.begin_edit(EmployeeId(employee_id))
    return _form(controller)


@router.patch("/draft", response_model=FormResponse)
async def update_draft(
    body: DraftUpdate,
    controller: RecordListController = Depends(get_controller),
):
    """Write draft fields the way bound input widgets would."""
    with controller.notifier.batch():
        if body.draft_name is not None:
            controller.draft_name.value = body.draft_name
        if body.draft_position is not None:
            controller.draft_position.value = body.draft_position
        if body.draft_salary_text is not None:
            controller.draft_salary_text.value = body.draft_salary_text
    return _form(controller)


@router.post("/cancel", response_model=FormResponse)
async def cancel(controller: RecordListController = Depends(get_controller)):
    controller.cancel()
    return _form(controller)


@router.post("/confirm", response_model=ConfirmResponse)
async def confirm(controller: RecordListController = Depends(get_controller)):
    """Validate and persist the form. Waits behind any mutation already in flight."""
    saved = await controller.confirm()
    return ConfirmResponse(
        saved=saved,
        form=_form(controller),
        records=[EmployeeResponse.from_domain(e) for e in controller.records.value],
    )
