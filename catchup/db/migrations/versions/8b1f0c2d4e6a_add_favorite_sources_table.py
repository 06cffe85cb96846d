"""add favorite sources table

Revision ID: 8b1f0c2d4e6a
Revises:
Create Date: 2025-11-10 09:00:00.000000
"""

from __future__ import annotations

from typing import Sequence

from alembic import op
import sqlalchemy as sa

revision: str = "8b1f0c2d4e6a"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "favorite_sources",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("news_api_key", sa.String(length=255), nullable=False),
        sa.Column("source_id", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint(
            "news_api_key",
            "source_id",
            name="uq_favorite_sources_news_api_key_source_id",
        ),
    )
    op.create_index(
        "ix_favorite_sources_news_api_key",
        "favorite_sources",
        ["news_api_key"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_favorite_sources_news_api_key", table_name="favorite_sources")
    op.drop_table("favorite_sources")
