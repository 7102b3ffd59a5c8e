"""Dependency injection factories for API v1.

This module is the composition root: the profile cache and the view counter
live for the whole process and are shared by every request.
"""

from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.services.profile_cache import ProfileCache
from domain.services.profile_service import ProfileLookupService
from domain.services.view_counter import ViewCounter
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_cache() -> ProfileCache:
    """Get the process-wide profile cache."""
    return ProfileCache(ttl_seconds=settings.profile_cache_ttl_seconds)


@lru_cache
def get_view_counter() -> ViewCounter:
    """Get View counter instance."""
    return ViewCounter(
        get_uow_factory(),
        serialize=settings.view_dedup_lock_enabled,
    )


@lru_cache
def get_profile_service() -> ProfileLookupService:
    """Get Profile lookup service instance."""
    return ProfileLookupService(
        get_uow_factory(),
        cache=get_profile_cache(),
        view_counter=get_view_counter(),
    )
