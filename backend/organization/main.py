"""Organization Roster API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RosterError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Lifespan creates the schema, wires store → controller and runs the initial load

Design Decisions:
    - One DatabaseSessionManager and one RecordListController per process, kept on app.state
    - Initial load failure is logged, not fatal: the API starts with an empty list and
      /records/reload can be retried once the database is back
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from organization.api.error_handlers import register_error_handlers
from organization.api.routes import changes, form, health, records
from organization.config import get_settings
from organization.core.errors import RosterError
from organization.infrastructure.database import DatabaseSessionManager
from organization.infrastructure.employee_store import SqlEmployeeStore
from organization.infrastructure.observability import setup_logging
from organization.services.record_list_controller import RecordListController

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    controller = RecordListController(SqlEmployeeStore(db_manager))
    app.state.db_manager = db_manager
    app.state.controller = controller
    try:
        await db_manager.create_schema()
        await controller.load()
    except RosterError as e:
        logger.error(f"Initial load failed: {e.message}", extra={"error_code": e.code})
    logger.info("Roster API started")
    yield
    logger.info("Roster API shutting down")
    await db_manager.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Organization Roster API", version="1.0.0", lifespan=lifespan,
    )

    settings = get_settings()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(records.router)
    app.include_router(form.router)
    app.include_router(changes.router)

    register_error_handlers(app)
    return app


app = create_app()
