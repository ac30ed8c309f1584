"""create trading_platforms table

Revision ID: 3a1f0c2b7d91
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3a1f0c2b7d91"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "trading_platforms",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("slug", sa.String(length=255), nullable=False),
        sa.Column("subdomain", sa.String(length=63), nullable=True),
        sa.Column("custom_domain", sa.String(length=253), nullable=True),
        sa.Column("template_id", sa.Integer(), nullable=True),
        sa.Column("config", postgresql.JSONB(), nullable=False),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.Column(
            "is_published",
            sa.Boolean(),
            nullable=False,
            server_default=sa.false(),
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_trading_platforms_user_id", "trading_platforms", ["user_id"], unique=False
    )
    op.create_index(
        "ix_trading_platforms_slug", "trading_platforms", ["slug"], unique=True
    )
    # A hostname maps to at most one platform
    op.create_index(
        "ix_trading_platforms_subdomain",
        "trading_platforms",
        ["subdomain"],
        unique=True,
    )
    op.create_index(
        "ix_trading_platforms_custom_domain",
        "trading_platforms",
        ["custom_domain"],
        unique=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_trading_platforms_custom_domain", table_name="trading_platforms")
    op.drop_index("ix_trading_platforms_subdomain", table_name="trading_platforms")
    op.drop_index("ix_trading_platforms_slug", table_name="trading_platforms")
    op.drop_index("ix_trading_platforms_user_id", table_name="trading_platforms")
    op.drop_table("trading_platforms")
