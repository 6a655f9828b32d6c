"""Change Stream — SSE feed of controller field notifications.

Invariants:
    - One event per delivered field change, in delivery order (batches arrive whole)
    - The notifier subscription lives exactly as long as the stream
    - records values are sent as the full serialized list

Design Decisions:
    - StreamingResponse with an async generator, queue fed by a notifier listener
"""

import asyncio
import json
import logging
from enum import Enum
from typing import Any, AsyncIterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from organization.api.dependencies import get_controller
from organization.schemas.employee import EmployeeResponse
from organization.services.record_list_controller import RecordListController

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/changes", tags=["changes"])

# Keep proxies and browsers from buffering streamed events
_SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


def _serialize_value(field: str, value: Any) -> Any:
    if field == "records":
        return [EmployeeResponse.from_domain(e).model_dump(mode="json") for e in value]
    if isinstance(value, Enum):
        return value.value
    return value


def format_change_event(field: str, value: Any) -> str:
    """Format one field change as an SSE frame."""
    payload = {"field": field, "value": _serialize_value(field, value)}
    return f"event: change\ndata: {json.dumps(payload, ensure_ascii=False)}\n\n"


async def change_events(controller: RecordListController) -> AsyncIterator[str]:
    """Yield SSE frames for every change the controller publishes."""
    queue: asyncio.Queue[tuple[str, Any]] = asyncio.Queue()
    unsubscribe = controller.notifier.subscribe(
        lambda field, value: queue.put_nowait((field, value)),
    )
    try:
        while True:
            field, value = await queue.get()
            yield format_change_event(field, value)
    finally:
        unsubscribe()
        logger.debug("Change stream closed")


@router.get("")
async def stream_changes(
    controller: RecordListController = Depends(get_controller),
):
    return StreamingResponse(
        change_events(controller),
        media_type="text/event-stream",
        headers=_SSE_HEADERS,
    )
