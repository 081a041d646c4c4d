"""Add database indexes

Revision ID: 0003
Revises: 0002
Create Date: 2025-08-23 02:43:28
"""
from alembic import op
import sqlalchemy as sa

revision = "0003"
down_revision = "0002"
branch_labels = None
depends_on = None


def upgrade() -> None:
    with op.batch_alter_table("SensorData") as batch_op:
        batch_op.alter_column(
            "ChipId",
            existing_type=sa.Text(),
            type_=sa.String(50),
            existing_nullable=False,
        )
    op.create_index("IX_SensorData_CO2", "SensorData", ["Rco2"])
    op.create_index("IX_SensorData_Timestamp", "SensorData", ["timestamp"])


def downgrade() -> None:
    op.drop_index("IX_SensorData_CO2", table_name="SensorData")
    op.drop_index("IX_SensorData_Timestamp", table_name="SensorData")
    with op.batch_alter_table("SensorData") as batch_op:
        batch_op.alter_column(
            "ChipId",
            existing_type=sa.String(50),
            type_=sa.Text(),
            existing_nullable=False,
        )
