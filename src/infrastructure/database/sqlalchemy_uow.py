"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import StorageUnavailableError
from infrastructure.database.repositories.sqlalchemy_profile_repo import SQLAlchemyProfileRepository
from infrastructure.database.repositories.sqlalchemy_view_event_repo import (
    SQLAlchemyViewEventRepository,
)

logger = structlog.get_logger()

# Driver-level connection failures (refused, reset, DNS) surface as OSError.
STORAGE_ERRORS: tuple[type[BaseException], ...] = (SQLAlchemyError, OSError)


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy.

    Storage failures escaping the ``async with`` block are re-raised as
    :class:`StorageUnavailableError`, chained to the original error.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    @property
    def profiles(self) -> SQLAlchemyProfileRepository:
        """Get profile repository."""
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return SQLAlchemyProfileRepository(self._session)

    @property
    def view_events(self) -> SQLAlchemyViewEventRepository:
        """Get view event repository."""
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return SQLAlchemyViewEventRepository(self._session)

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            try:
                if exc_type:
                    try:
                        await self.rollback()
                    except STORAGE_ERRORS:
                        logger.warning("rollback_failed", exc_info=True)
            finally:
                await self._session.close()
                self._session = None

        if isinstance(exc_val, STORAGE_ERRORS):
            logger.error(
                "storage_error",
                error=str(exc_val),
                error_type=type(exc_val).__name__,
            )
            raise StorageUnavailableError() from exc_val
