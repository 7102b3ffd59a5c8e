"""SQLAlchemy ORM models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import BigInteger, Boolean, DateTime, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Public profile model, keyed by wallet address."""

    __tablename__ = "profiles"

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    wallet_id: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    bio: Mapped[str | None] = mapped_column(Text)
    custom_url: Mapped[str | None] = mapped_column(String(500))
    twitter_name: Mapped[str | None] = mapped_column(String(100))
    personal_url: Mapped[str | None] = mapped_column(String(500))
    picture: Mapped[str | None] = mapped_column(String(500))
    banner: Mapped[str | None] = mapped_column(String(500))
    artist: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    verified: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    review_requested: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


class ProfileViewModel(Base):
    """Append-only record of a profile view."""

    __tablename__ = "profile_views"
    __table_args__ = (
        Index("ix_profile_views_viewed_origin", "viewed", "viewer_origin"),
    )

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    # No foreign key: views are kept even if the profile row is replaced.
    viewed: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    viewer: Mapped[str | None] = mapped_column(String(128))
    viewer_origin: Mapped[str | None] = mapped_column(String(64))
    viewed_at_ms: Mapped[int] = mapped_column(BigInteger, nullable=False)
