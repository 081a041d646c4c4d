"""Store Atmp as double and Timestamp with microseconds

Revision ID: 0005
Revises: 0004
Create Date: 2026-10-19 10:12:40
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import mysql

revision = "0005"
down_revision = "0004"
branch_labels = None
depends_on = None

OLD_TIMESTAMP = sa.DateTime(timezone=True)
NEW_TIMESTAMP = sa.DateTime(timezone=True).with_variant(mysql.DATETIME(fsp=6), "mysql")


def upgrade() -> None:
    with op.batch_alter_table("SensorData") as batch_op:
        batch_op.alter_column("Atmp", existing_type=sa.Float(), type_=sa.Double(), existing_nullable=False)
        batch_op.alter_column("Timestamp", existing_type=OLD_TIMESTAMP, type_=NEW_TIMESTAMP, existing_nullable=True)


def downgrade() -> None:
    with op.batch_alter_table("SensorData") as batch_op:
        batch_op.alter_column("Timestamp", existing_type=NEW_TIMESTAMP, type_=OLD_TIMESTAMP, existing_nullable=True)
        batch_op.alter_column("Atmp", existing_type=sa.Double(), type_=sa.Float(), existing_nullable=False)
