"""create_activities_table

Revision ID: 8b2e4d6f1a93
Revises: 3f1a9c2b7d40
Create Date: 2026-10-19 10:01:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "8b2e4d6f1a93"
down_revision = "3f1a9c2b7d40"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "activities",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column(
            "date",
            sa.Date(),
            nullable=False,
            comment="Date when the activity occurred",
        ),
        sa.Column("travel_mode", sa.String(length=100), nullable=False),
        sa.Column("distance_km", sa.Numeric(precision=10, scale=3), nullable=False),
        sa.Column("food_item", sa.String(length=100), nullable=False),
        sa.Column("electricity_kwh", sa.Numeric(precision=10, scale=3), nullable=False),
        sa.Column("travel_emissions", sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column("food_emissions", sa.Numeric(precision=12, scale=3), nullable=False),
        sa.Column(
            "electricity_emissions", sa.Numeric(precision=12, scale=3), nullable=False
        ),
        sa.Column(
            "total_emissions",
            sa.Numeric(precision=12, scale=3),
            nullable=False,
            comment="Sum of the rounded travel, food and electricity emissions",
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        comment="Logged daily activities with computed emissions",
    )
    op.create_index(
        op.f("ix_activities_user_id"),
        "activities",
        ["user_id"],
        unique=False,
    )
    op.create_index(
        op.f("ix_activities_date"),
        "activities",
        ["date"],
        unique=False,
    )
    op.create_index(
        "ix_activities_user_date",
        "activities",
        ["user_id", "date"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_activities_user_date", table_name="activities")
    op.drop_index(op.f("ix_activities_date"), table_name="activities")
    op.drop_index(op.f("ix_activities_user_id"), table_name="activities")
    op.drop_table("activities")
