"""View event repository protocol."""

from typing import List, Protocol

from domain.entities.view_event import ViewEvent


class IViewEventRepository(Protocol):
    """Append-only ledger of profile views."""

    async def get_for_viewed(self, viewed: str) -> List[ViewEvent]:
        """Get every recorded view of a profile (full history, unpaginated)."""
        ...

    async def create(self, event: ViewEvent) -> ViewEvent:
        """Append a new view event."""
        ...
