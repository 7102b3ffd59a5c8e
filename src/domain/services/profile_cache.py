"""In-memory read-through cache for profile snapshots."""

import math
import time
from collections.abc import Callable
from dataclasses import replace

from cachetools import TTLCache

from domain.entities.profile import Profile


class ProfileCache:
    """Time-bounded, capacity-unbounded cache keyed by wallet address.

    Writes are set-if-absent: a live entry is never replaced, so a slow
    concurrent reader cannot clobber a snapshot stored by a faster one.
    Entries leave the cache only by expiring; there is no invalidation.
    Snapshots are copied on the way in and out, so callers mutating a
    profile never change what other requests see.
    """

    def __init__(
        self,
        ttl_seconds: float = 300,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl_seconds = ttl_seconds
        self._entries: TTLCache[str, Profile] = TTLCache(
            maxsize=math.inf, ttl=ttl_seconds, timer=timer
        )

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def get(self, wallet_id: str) -> Profile | None:
        """Return the live snapshot for ``wallet_id`` or None on a miss."""
        self._entries.expire()
        cached = self._entries.get(wallet_id)
        return replace(cached) if cached is not None else None

    def has(self, wallet_id: str) -> bool:
        """Check whether a live entry exists."""
        return wallet_id in self._entries

    def set(self, wallet_id: str, profile: Profile) -> bool:
        """Store ``profile`` unless a live entry already exists.

        Returns:
            True if the snapshot was stored, False if the call was a no-op.
        """
        if self.has(wallet_id):
            return False
        self._entries[wallet_id] = replace(profile)
        return True

    def clear(self) -> None:
        """Drop every entry (test isolation only)."""
        self._entries.clear()

    def __len__(self) -> int:
        self._entries.expire()
        return len(self._entries)
