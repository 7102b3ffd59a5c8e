"""Pydantic schemas for Profile API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from domain.entities.profile import Profile, ProfileWithViews


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "wallet_id": "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY",
                "name": "alice",
                "bio": "Digital artist",
                "twitter_name": "@alice",
                "artist": True,
                "verified": False,
                "review_requested": False,
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-01-28T10:00:00",
                "views_count": 42,
            }
        },
    )

    id: UUID
    wallet_id: str
    name: str
    bio: str | None = None
    custom_url: str | None = None
    twitter_name: str | None = None
    personal_url: str | None = None
    picture: str | None = None
    banner: str | None = None
    artist: bool = False
    verified: bool = False
    review_requested: bool = False
    created_at: datetime
    updated_at: datetime
    views_count: int = 0

    @classmethod
    def from_entity(cls, profile: Profile, views_count: int = 0) -> "ProfileResponse":
        return cls.model_validate(profile).model_copy(update={"views_count": views_count})

    @classmethod
    def from_lookup(cls, result: ProfileWithViews) -> "ProfileResponse":
        return cls.from_entity(result.profile, result.views_count)


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]
    meta: dict[str, int]
