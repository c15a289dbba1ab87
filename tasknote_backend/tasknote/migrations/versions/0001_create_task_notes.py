"""Create task_notes table

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the task_notes table."""
    op.create_table(
        "task_notes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_task_notes_id", "task_notes", ["id"])
    op.create_index("ix_task_notes_created_at", "task_notes", ["created_at"])


def downgrade() -> None:
    """Drop the task_notes table."""
    op.drop_index("ix_task_notes_created_at", table_name="task_notes")
    op.drop_index("ix_task_notes_id", table_name="task_notes")
    op.drop_table("task_notes")
