"""SQLAlchemy implementation of Profile repository."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile
from infrastructure.database.models import ProfileModel

# Columns callers may change through update(); identity columns are excluded.
UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "bio",
        "custom_url",
        "twitter_name",
        "personal_url",
        "picture",
        "banner",
        "artist",
        "verified",
        "review_requested",
    }
)


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_wallet_id(self, wallet_id: str) -> Profile | None:
        """Get a profile by wallet address."""
        model = await self._get_model(wallet_id)
        return self._to_entity(model) if model else None

    async def get_by_ids(self, ids: list[UUID]) -> list[Profile]:
        """Get profiles by id, in request order with duplicates collapsed."""
        if not ids:
            return []

        unique_ids = list(dict.fromkeys(ids))
        stmt = select(ProfileModel).where(ProfileModel.id.in_(unique_ids))
        result = await self._session.execute(stmt)
        by_id = {model.id: model for model in result.scalars().all()}
        return [self._to_entity(by_id[i]) for i in unique_ids if i in by_id]

    async def update(self, wallet_id: str, fields: dict[str, Any]) -> Profile | None:
        """Apply field changes to a profile."""
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")

        model = await self._get_model(wallet_id)
        if not model:
            return None

        for name, value in fields.items():
            setattr(model, name, value)

        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def _get_model(self, wallet_id: str) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.wallet_id == wallet_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            wallet_id=model.wallet_id,
            name=model.name,
            bio=model.bio,
            custom_url=model.custom_url,
            twitter_name=model.twitter_name,
            personal_url=model.personal_url,
            picture=model.picture,
            banner=model.banner,
            artist=model.artist,
            verified=model.verified,
            review_requested=model.review_requested,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
