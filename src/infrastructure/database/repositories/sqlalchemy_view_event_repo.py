"""SQLAlchemy implementation of the view event ledger."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.view_event import ViewEvent
from infrastructure.database.models import ProfileViewModel


class SQLAlchemyViewEventRepository:
    """SQLAlchemy implementation of IViewEventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_for_viewed(self, viewed: str) -> list[ViewEvent]:
        """Get every recorded view of a profile, oldest first."""
        stmt = (
            select(ProfileViewModel)
            .where(ProfileViewModel.viewed == viewed)
            .order_by(ProfileViewModel.viewed_at_ms)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, event: ViewEvent) -> ViewEvent:
        """Append a new view event."""
        model = ProfileViewModel(
            id=event.id,
            viewed=event.viewed,
            viewer=event.viewer,
            viewer_origin=event.viewer_origin,
            viewed_at_ms=event.timestamp,
        )
        self._session.add(model)
        await self._session.flush()
        return event

    def _to_entity(self, model: ProfileViewModel) -> ViewEvent:
        """Convert ORM model to domain entity."""
        return ViewEvent(
            id=model.id,
            viewed=model.viewed,
            viewer=model.viewer,
            viewer_origin=model.viewer_origin,
            timestamp=model.viewed_at_ms,
        )
