"""Notes request log

Revision ID: 001
Revises:
Create Date: 2026-10-18

Creates the notes_request table holding every accepted generation request
together with its generated notes.
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create notes_request table."""
    op.create_table(
        "notes_request",
        sa.Column("request_id", sa.Uuid(), primary_key=True),
        sa.Column("class_level", sa.Integer(), nullable=False),
        sa.Column("subject", sa.Text(), nullable=False),
        sa.Column("chapter_name", sa.Text(), nullable=True),
        sa.Column("language", sa.Text(), nullable=False),
        sa.Column(
            "generated_notes",
            sa.JSON().with_variant(postgresql.JSONB(), "postgresql"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("idx_notes_request_created", "notes_request", ["created_at"])


def downgrade() -> None:
    """Drop notes_request table."""
    op.drop_index("idx_notes_request_created", table_name="notes_request")
    op.drop_table("notes_request")
