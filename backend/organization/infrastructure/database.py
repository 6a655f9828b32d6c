"""Database Session Manager — async engine, automatic rollback, error mapping, health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - IntegrityError mapped to ConstraintViolationError; every other SQLAlchemy
      failure mapped to StoreUnavailableError (core/errors.py), carrying the
      caller's ErrorContext
    - Pool sizing only applied to server databases; SQLite keeps SQLAlchemy's default pool

Design Decisions:
    - One manager per process, created by the FastAPI lifespan and handed to the store
    - expire_on_commit=False: rows stay readable after commit in async context
    - create_schema() creates missing tables and nothing else (no migrations)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from organization.core.errors import (
    ConstraintViolationError, ErrorContext, StoreUnavailableError,
)
from organization.db.base import Base

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with rollback, error mapping and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_options: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_options.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_options)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, context: ErrorContext | None = None,
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception.

        context is attached to the mapped RosterError so handlers can log which
        employee and store action failed.
        """
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise ConstraintViolationError(
                "Integrity constraint violated", "commit", context,
            )
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise StoreUnavailableError(
                "Connection or operational error", "execute", context,
            )
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise StoreUnavailableError("Database driver error", "query", context)
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StoreUnavailableError("Database operation failed", "unknown", context)
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables."""
        import organization.models  # noqa: F401  (populates Base.metadata)

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(f"Schema creation failed: {e}")
            raise StoreUnavailableError("Schema creation failed", "create_schema")

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
