"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass
class Profile:
    """Domain entity for a public profile, keyed by wallet address.

    The view count is not part of the entity; it is computed per lookup and
    carried alongside the profile in :class:`ProfileWithViews`.
    """

    wallet_id: str
    name: str = ""
    id: UUID = field(default_factory=uuid4)
    bio: Optional[str] = None
    custom_url: Optional[str] = None
    twitter_name: Optional[str] = None
    personal_url: Optional[str] = None
    picture: Optional[str] = None
    banner: Optional[str] = None
    artist: bool = False
    verified: bool = False
    review_requested: bool = False
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass(frozen=True, slots=True)
class ProfileWithViews:
    """Read-only value object: a Profile bundled with its view count."""

    profile: Profile
    views_count: int = 0
