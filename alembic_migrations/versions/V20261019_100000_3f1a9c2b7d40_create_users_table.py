"""create_users_table

Revision ID: 3f1a9c2b7d40
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1a9c2b7d40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=False),
        sa.Column(
            "college_id",
            sa.String(length=50),
            nullable=False,
            comment="College / staff identifier",
        ),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=30), nullable=False),
        sa.Column(
            "role",
            sa.String(length=20),
            nullable=False,
            comment="student or staff",
        ),
        sa.Column(
            "reward_points",
            sa.Integer(),
            nullable=False,
            comment="Current redeemable reward points balance",
        ),
        sa.Column(
            "total_emissions",
            sa.Numeric(precision=12, scale=3),
            nullable=False,
            comment="Cumulative logged emissions (kg CO2)",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        comment="Campus users with reward and emission totals",
    )
    op.create_index(
        op.f("ix_users_college_id"),
        "users",
        ["college_id"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_users_college_id"), table_name="users")
    op.drop_table("users")
