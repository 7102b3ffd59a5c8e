"""View accounting against the view event ledger."""

import time
from collections.abc import Callable
from typing import Optional

import structlog

from core.locks import KeyedLock
from domain.entities.view_event import ViewEvent
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.dedup_policy import VIEW_DEDUP_WINDOW_MS, decide

logger = structlog.get_logger()


def epoch_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


class ViewCounter:
    """Records profile views, deduplicated per origin, and reports the total.

    The ledger read and the conditional append are not atomic at the storage
    layer. With ``serialize`` on, calls for the same (viewed, origin) pair are
    queued behind a per-key lock so concurrent requests inside this process
    cannot both append. Separate processes can still race and over-count.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        clock: Callable[[], int] = epoch_millis,
        window_ms: int = VIEW_DEDUP_WINDOW_MS,
        serialize: bool = True,
    ) -> None:
        self._uow_factory = uow_factory
        self._clock = clock
        self._window_ms = window_ms
        self._locks: Optional[KeyedLock] = KeyedLock() if serialize else None

    async def record_view(
        self,
        viewed: str,
        viewer: Optional[str] = None,
        viewer_origin: Optional[str] = None,
    ) -> int:
        """Account for one view of ``viewed`` and return the resulting count.

        Args:
            viewed: Wallet address of the profile being viewed.
            viewer: Wallet address of the visitor, if known.
            viewer_origin: Network origin of the visitor; the dedup key.

        Returns:
            Number of recorded views, including this one if it was recorded.

        Raises:
            StorageUnavailableError: If the ledger cannot be read or written.
        """
        # Anonymous-origin views never write, so there is nothing to serialize.
        if self._locks is None or viewer_origin is None:
            return await self._record(viewed, viewer, viewer_origin)

        async with self._locks.hold((viewed, viewer_origin)):
            return await self._record(viewed, viewer, viewer_origin)

    async def _record(
        self,
        viewed: str,
        viewer: Optional[str],
        viewer_origin: Optional[str],
    ) -> int:
        async with self._uow_factory() as uow:
            prior = await uow.view_events.get_for_viewed(viewed)
            now = self._clock()
            decision = decide(prior, viewer_origin, now, self._window_ms)

            if decision.should_record:
                await uow.view_events.create(
                    ViewEvent(
                        viewed=viewed,
                        viewer=viewer,
                        viewer_origin=viewer_origin,
                        timestamp=now,
                    )
                )
                await uow.commit()
                logger.info(
                    "profile_view_recorded",
                    wallet_id=viewed,
                    views_count=decision.count,
                )

            return decision.count
