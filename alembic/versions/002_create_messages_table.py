"""Create messages table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "messages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("from_username", sa.String(length=64), sa.ForeignKey("users.username"), nullable=False),
        sa.Column("to_username", sa.String(length=64), sa.ForeignKey("users.username"), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("sent_at", sa.DateTime(), nullable=False),
        sa.Column("read_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_messages_from_username"), "messages", ["from_username"])
    op.create_index(op.f("ix_messages_to_username"), "messages", ["to_username"])


def downgrade() -> None:
    op.drop_index(op.f("ix_messages_to_username"), table_name="messages")
    op.drop_index(op.f("ix_messages_from_username"), table_name="messages")
    op.drop_table("messages")
