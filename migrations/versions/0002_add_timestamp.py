"""Add timestamp

Revision ID: 0002
Revises: 0001
Create Date: 2023-11-20 18:42:11
"""
from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Nullable: rows already stored have no ingestion time
    op.add_column("SensorData", sa.Column("timestamp", sa.DateTime(timezone=True), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("SensorData") as batch_op:
        batch_op.drop_column("timestamp")
