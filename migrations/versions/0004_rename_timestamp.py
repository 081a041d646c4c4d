"""Rename timestamp to Timestamp

Revision ID: 0004
Revises: 0003
Create Date: 2025-08-23 23:07:06
"""
from alembic import op
import sqlalchemy as sa

revision = "0004"
down_revision = "0003"
branch_labels = None
depends_on = None


def upgrade() -> None:
    with op.batch_alter_table("SensorData") as batch_op:
        batch_op.alter_column(
            "timestamp",
            new_column_name="Timestamp",
            existing_type=sa.DateTime(timezone=True),
            existing_nullable=True,
        )


def downgrade() -> None:
    with op.batch_alter_table("SensorData") as batch_op:
        batch_op.alter_column(
            "Timestamp",
            new_column_name="timestamp",
            existing_type=sa.DateTime(timezone=True),
            existing_nullable=True,
        )
