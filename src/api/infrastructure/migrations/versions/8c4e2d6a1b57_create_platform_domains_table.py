"""create platform_domains table

Revision ID: 8c4e2d6a1b57
Revises: 3a1f0c2b7d91
Create Date: 2026-10-19 10:30:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "8c4e2d6a1b57"
down_revision: Union[str, Sequence[str], None] = "3a1f0c2b7d91"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "platform_domains",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("platform_id", sa.Integer(), nullable=False),
        sa.Column("domain", sa.String(length=253), nullable=False),
        sa.Column("verification_token", sa.String(length=64), nullable=False),
        sa.Column(
            "verification_method", sa.String(length=16), nullable=False
        ),  # dns_txt
        sa.Column("status", sa.String(length=16), nullable=False),  # pending | active
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["platform_id"],
            ["trading_platforms.id"],
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_platform_domains_platform_id",
        "platform_domains",
        ["platform_id"],
        unique=False,
    )
    op.create_index(
        "ix_platform_domains_domain", "platform_domains", ["domain"], unique=True
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_platform_domains_domain", table_name="platform_domains")
    op.drop_index("ix_platform_domains_platform_id", table_name="platform_domains")
    op.drop_table("platform_domains")
