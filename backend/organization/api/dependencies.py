"""API Dependencies — hands the process-wide collaborators to route handlers.

Invariants:
    - The controller and the session manager live on app.state, set by the lifespan
    - Routes never construct stores or controllers themselves

Design Decisions:
    - FastAPI Depends() over module globals: tests swap in a controller on a fake
      store through app.dependency_overrides
"""

from fastapi import Request

from organization.infrastructure.database import DatabaseSessionManager
from organization.services.record_list_controller import RecordListController


def get_controller(request: Request) -> RecordListController:
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise RuntimeError("Controller not initialized")
    return controller


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)
