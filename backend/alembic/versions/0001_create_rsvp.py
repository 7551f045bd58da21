"""create_rsvp

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates the single `rsvp` table backing the RSVP service.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "rsvp",
        sa.Column("rsvp_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("guest_name", sa.String(50), nullable=False),
        sa.Column("total_attending", sa.Integer, nullable=False),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("rsvp")
