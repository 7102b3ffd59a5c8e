"""Profile repository protocol."""

from typing import Any, Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get_by_wallet_id(self, wallet_id: str) -> Profile | None:
        """Get a profile by wallet address."""
        ...

    async def get_by_ids(self, ids: list[UUID]) -> list[Profile]:
        """Get the profiles whose ids are listed, skipping unknown ids."""
        ...

    async def update(self, wallet_id: str, fields: dict[str, Any]) -> Profile | None:
        """Apply field changes to a profile. Returns None if it does not exist."""
        ...
