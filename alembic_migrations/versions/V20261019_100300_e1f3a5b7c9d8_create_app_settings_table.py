"""create_app_settings_table

Revision ID: e1f3a5b7c9d8
Revises: c5d7e9f1b3a2
Create Date: 2026-10-19 10:03:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "e1f3a5b7c9d8"
down_revision = "c5d7e9f1b3a2"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "app_settings",
        sa.Column(
            "key",
            sa.String(length=100),
            nullable=False,
            comment="Fixed setting name (e.g., 'emission_factors')",
        ),
        sa.Column(
            "value",
            sa.Text(),
            nullable=False,
            comment="Serialized setting value (JSON)",
        ),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("key"),
        comment="Key-value application settings",
    )


def downgrade() -> None:
    op.drop_table("app_settings")
