"""Create room table.

Revision ID: 001_create_room
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_room"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "room",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        sa.Column("room_id", sa.BigInteger, nullable=True),
        sa.Column("room_name", sa.String(255), nullable=False),
        sa.Column("room_capacity", sa.Integer, nullable=True),
    )


def downgrade() -> None:
    op.drop_table("room")
