"""Database Session Manager: async engine with automatic rollback and schema bootstrap.

Invariants:
    - One engine per manager; one manager per process (built in the app lifespan)
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - create_schema() is idempotent (CREATE TABLE IF NOT EXISTS semantics)

Design Decisions:
    - Manager is passed explicitly to SqlItemStore; there is no module-level singleton
    - expire_on_commit=False: attributes stay readable after commit in async context
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

from items_api.core.errors import DatabaseError
from items_api.db.base import Base
import items_api.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions with error mapping."""

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_async_engine(database_url, echo=echo)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, operation: str = "unknown",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}", extra={"operation": operation})
            raise DatabaseError(operation, "Integrity constraint violated") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}", extra={"operation": operation})
            raise DatabaseError(operation, "Connection or operational error") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}", extra={"operation": operation})
            raise DatabaseError(operation, "Database driver error") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": operation})
            raise DatabaseError(operation, "Database operation failed") from e
        finally:
            await session.close()

    async def create_schema(self) -> None:
        """Create missing tables. Safe to run on every startup."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            logger.error(f"Schema bootstrap failed: {e}")
            raise DatabaseError("create_schema", "Schema bootstrap failed") from e

    async def dispose(self) -> None:
        await self.engine.dispose()
