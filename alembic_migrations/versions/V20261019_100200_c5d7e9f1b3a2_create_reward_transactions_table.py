"""create_reward_transactions_table

Revision ID: c5d7e9f1b3a2
Revises: 8b2e4d6f1a93
Create Date: 2026-10-19 10:02:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "c5d7e9f1b3a2"
down_revision = "8b2e4d6f1a93"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "reward_transactions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False, comment="earn or redeem"),
        sa.Column("points", sa.Integer(), nullable=False),
        sa.Column("reason", sa.String(length=255), nullable=False),
        sa.Column("cafeteria", sa.String(length=50), nullable=True),
        sa.Column("item", sa.String(length=100), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        comment="Reward points earned and redeemed",
    )
    op.create_index(
        op.f("ix_reward_transactions_user_id"),
        "reward_transactions",
        ["user_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(
        op.f("ix_reward_transactions_user_id"), table_name="reward_transactions"
    )
    op.drop_table("reward_transactions")
