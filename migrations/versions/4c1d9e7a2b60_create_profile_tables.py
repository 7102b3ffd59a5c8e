"""create_profile_tables

Revision ID: 4c1d9e7a2b60
Revises:
Create Date: 2026-10-19 10:12:44.518230

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1d9e7a2b60"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create profiles and profile_views tables."""
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("wallet_id", sa.String(length=128), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("custom_url", sa.String(length=500), nullable=True),
        sa.Column("twitter_name", sa.String(length=100), nullable=True),
        sa.Column("personal_url", sa.String(length=500), nullable=True),
        sa.Column("picture", sa.String(length=500), nullable=True),
        sa.Column("banner", sa.String(length=500), nullable=True),
        sa.Column("artist", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "review_requested", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("wallet_id"),
    )

    op.create_table(
        "profile_views",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("viewed", sa.String(length=128), nullable=False),
        sa.Column("viewer", sa.String(length=128), nullable=True),
        sa.Column("viewer_origin", sa.String(length=64), nullable=True),
        sa.Column("viewed_at_ms", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    # Full history per profile (view count)
    op.create_index("ix_profile_views_viewed", "profile_views", ["viewed"], unique=False)
    # Latest view per (profile, origin) for dedup
    op.create_index(
        "ix_profile_views_viewed_origin",
        "profile_views",
        ["viewed", "viewer_origin"],
        unique=False,
    )


def downgrade() -> None:
    """Drop profile tables."""
    op.drop_index("ix_profile_views_viewed_origin", table_name="profile_views")
    op.drop_index("ix_profile_views_viewed", table_name="profile_views")
    op.drop_table("profile_views")
    op.drop_table("profiles")
