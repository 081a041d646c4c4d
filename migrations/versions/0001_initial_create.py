"""Initial create

Revision ID: 0001
Revises:
Create Date: 2023-11-15 23:08:09
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "SensorData",
        sa.Column("Id", sa.BigInteger().with_variant(sa.Integer(), "sqlite"), primary_key=True, autoincrement=True),
        sa.Column("ChipId", sa.Text(), nullable=False),
        sa.Column("Wifi", sa.Integer(), nullable=False),
        sa.Column("Rco2", sa.Integer(), nullable=False),
        sa.Column("Pm02", sa.Integer(), nullable=False),
        sa.Column("Atmp", sa.Float(), nullable=False),
        sa.Column("Rhum", sa.Integer(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("SensorData")
