"""Profile lookup service layer."""

from typing import Callable, Optional
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError, StorageUnavailableError
from domain.entities.profile import Profile, ProfileWithViews
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_cache import ProfileCache
from domain.services.view_counter import ViewCounter

logger = structlog.get_logger()


class ProfileLookupService:
    """Serves profiles through the read-through cache, with view accounting."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        cache: ProfileCache,
        view_counter: ViewCounter,
    ) -> None:
        self._uow_factory = uow_factory
        self._cache = cache
        self._view_counter = view_counter

    async def find(
        self,
        wallet_id: str,
        increment_view: bool = False,
        viewer: Optional[str] = None,
        viewer_origin: Optional[str] = None,
        bypass_cache: bool = False,
    ) -> ProfileWithViews:
        """Look up a profile, optionally recording a view of it.

        A view-incrementing lookup is never answered from the cache since it
        has to consult the view ledger. Cached and plain lookups report a
        ``views_count`` of 0.

        Args:
            wallet_id: Wallet address of the profile.
            increment_view: Record (or dedup) a view and return the count.
            viewer: Wallet address of the visitor, if known.
            viewer_origin: Network origin of the visitor.
            bypass_cache: Read from the store even on a cache hit.

        Raises:
            ProfileNotFoundError: No profile exists for ``wallet_id``.
            StorageUnavailableError: The store or the ledger failed.
        """
        if not bypass_cache and not increment_view:
            cached = self._cache.get(wallet_id)
            if cached is not None:
                return ProfileWithViews(profile=cached)

        try:
            async with self._uow_factory() as uow:
                profile = await uow.profiles.get_by_wallet_id(wallet_id)
            if profile is None:
                raise ProfileNotFoundError(wallet_id)

            views_count = 0
            if increment_view:
                views_count = await self._view_counter.record_view(
                    wallet_id, viewer=viewer, viewer_origin=viewer_origin
                )
        except StorageUnavailableError as exc:
            logger.warning(
                "profile_lookup_failed",
                wallet_id=wallet_id,
                increment_view=increment_view,
                cause=repr(exc.__cause__),
            )
            raise

        self._cache.set(wallet_id, profile)
        return ProfileWithViews(profile=profile, views_count=views_count)

    async def find_by_ids(self, ids: list[UUID]) -> list[Profile]:
        """Fetch several profiles by id in one store read.

        Unknown ids are skipped. The cache is neither read nor filled, and no
        views are recorded.
        """
        if not ids:
            return []

        async with self._uow_factory() as uow:
            return await uow.profiles.get_by_ids(ids)

    async def request_review(self, wallet_id: str) -> Profile:
        """Flag a profile as waiting for verification review.

        The cached snapshot is left alone and catches up once it expires.
        """
        async with self._uow_factory() as uow:
            updated = await uow.profiles.update(wallet_id, {"review_requested": True})
            if updated is None:
                raise ProfileNotFoundError(wallet_id)
            await uow.commit()

        logger.info("profile_review_requested", wallet_id=wallet_id)
        return updated
